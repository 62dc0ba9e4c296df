"""Allow ``python -m threadsafety_registry``."""

import sys

from threadsafety_registry.main import main

sys.exit(main())
