"""Platform backend, chosen once at import time."""

import sys

if sys.platform.startswith("linux"):
    from proclimits.platform.linux import SUPPORTED, limits_for
else:
    from proclimits.platform.unsupported import SUPPORTED, limits_for

__all__ = ["SUPPORTED", "limits_for"]
