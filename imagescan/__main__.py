import sys

from imagescan.main import main

sys.exit(main())
