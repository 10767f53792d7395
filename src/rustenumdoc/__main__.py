import sys

from rustenumdoc.cli import main

sys.exit(main())
