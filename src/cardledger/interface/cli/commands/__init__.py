"""
CLI commands package.
"""

from ._common import RegisterChoice
from .inspect import inspect_command
from .shell import shell_command

__all__ = ["RegisterChoice", "inspect_command", "shell_command"]
