import sys

from .mcp_server_std import main

sys.exit(main())
