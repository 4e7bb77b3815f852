import sys

from dirsize.main import main

sys.exit(main())
