import sys

from gomoku.main import main

sys.exit(main())
