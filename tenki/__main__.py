import sys

from tenki.cli import main

sys.exit(main())
