"""
cardledger - Visitor card registers

Keeps the recipients and active-cards registers, exports them to
right-to-left Arabic spreadsheets and re-imports edited ones.
"""

import sys
from cardledger.interface.cli import main


if __name__ == "__main__":
    sys.exit(main())
