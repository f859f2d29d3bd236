import sys

from branch_updater.action import main

if __name__ == "__main__":
    sys.exit(main())
