import sys

from dfamatch.cli import main

sys.exit(main())
