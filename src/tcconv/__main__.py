import sys

from tcconv.cli import main

sys.exit(main())
