import sys

from randomkey.cli import main

sys.exit(main())
