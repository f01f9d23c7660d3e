import sys

from native_price.main import main

sys.exit(main())
