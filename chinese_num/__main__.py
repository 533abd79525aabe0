"""Allow `python -m chinese_num 121 020 ...`."""

import sys

from .cli import main

if __name__ == "__main__":
    sys.exit(main())
