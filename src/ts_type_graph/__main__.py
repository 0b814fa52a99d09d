import sys

from ts_type_graph.cli import main

sys.exit(main())
