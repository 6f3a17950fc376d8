import sys

from volleyzone_tables.main import main

sys.exit(main())
