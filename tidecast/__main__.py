import sys

from tidecast.cli import main

sys.exit(main())
