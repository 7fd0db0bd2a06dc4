import sys

from radialcolor.main import main

if __name__ == "__main__":
    sys.exit(main())
