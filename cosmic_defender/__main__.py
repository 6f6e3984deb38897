import sys

from cosmic_defender.main import main

sys.exit(main())
