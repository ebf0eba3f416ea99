import sys

from report_pager.cli import main

if __name__ == "__main__":
    sys.exit(main())
