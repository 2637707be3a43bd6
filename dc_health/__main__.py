import sys

from dc_health.cli import main

sys.exit(main())
