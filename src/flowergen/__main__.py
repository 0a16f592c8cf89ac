import sys

from flowergen.cli import main

sys.exit(main())
