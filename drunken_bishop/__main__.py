import sys

from drunken_bishop.cli import main

sys.exit(main())
