import sys

from oncall_bot.main import main

sys.exit(main())
