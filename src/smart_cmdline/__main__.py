"""Allow ``python -m smart_cmdline``."""

import sys

from smart_cmdline.cli.main import main

if __name__ == "__main__":
    sys.exit(main())
