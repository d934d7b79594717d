import sys

from notevault.main import main

sys.exit(main())
