"""Terminal formatters for the cardledger CLI."""

from .register_formatter import RegisterFormatter

__all__ = ["RegisterFormatter"]
