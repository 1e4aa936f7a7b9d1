import sys

from apps.linerev.main import main

sys.exit(main())
