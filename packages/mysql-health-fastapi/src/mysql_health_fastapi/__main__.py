"""Allow ``python -m mysql_health_fastapi``."""

import sys

from mysql_health_fastapi.cli import main

sys.exit(main())
