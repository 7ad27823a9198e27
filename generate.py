import sys

from newspage import main


if __name__ == '__main__':
  sys.exit(main())
