import sys

from boxpack.runner.experiment import main

sys.exit(main())
