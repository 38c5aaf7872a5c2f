import sys

from ordered_ini.cli import main

sys.exit(main())
