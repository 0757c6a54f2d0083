import sys

from pokedex.seed.cli import main

sys.exit(main())
