import sys

from driftbox.cli import main

sys.exit(main())
