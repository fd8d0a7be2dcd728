import sys

from aoc_times.cli import main

sys.exit(main())
