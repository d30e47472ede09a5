import sys

from wordtrie.cli import main

sys.exit(main())
