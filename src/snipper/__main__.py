import sys

from snipper.cli import main

sys.exit(main())
