import sys

from shamir_recover.cli import main

sys.exit(main())
