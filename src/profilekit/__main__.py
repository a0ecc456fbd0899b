import sys

from profilekit.cli._dispatcher import main

if __name__ == "__main__":
    sys.exit(main())
