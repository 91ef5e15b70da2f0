""" Entry-point for `python -m clocksync` """

import sys
from clocksync.cli.clocksync import main

sys.exit(main())
