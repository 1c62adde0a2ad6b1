import sys

from exprcc.controller.driver import main

sys.exit(main())
