import sys

from geo_trivia.cli import main

sys.exit(main())
