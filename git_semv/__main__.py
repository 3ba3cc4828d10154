import sys

from git_semv.cli import main

sys.exit(main())
