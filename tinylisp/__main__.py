import sys

from tinylisp.repl import main

sys.exit(main())
