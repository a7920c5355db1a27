import sys

from numeris.demo import main

sys.exit(main())
