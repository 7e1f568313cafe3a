"""Allow ``python -m geojson_typed``."""

import sys

from geojson_typed.cli import main

sys.exit(main())
