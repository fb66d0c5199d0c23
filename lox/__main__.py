import sys

from lox.main import main


sys.exit(main())
