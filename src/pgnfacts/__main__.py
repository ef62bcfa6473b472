import sys

from pgnfacts.cli import main

sys.exit(main())
