"""Allow running as python -m proclimits."""

import sys

from proclimits.cli import main

sys.exit(main())
