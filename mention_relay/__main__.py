import sys

from mention_relay.launcher import main

sys.exit(main())
