import sys

from bounty_agent.cli import main

sys.exit(main())
