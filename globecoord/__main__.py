import sys

from globecoord.cli import main

sys.exit(main())
