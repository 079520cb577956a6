import sys

from magisk_hluda.cli import main

sys.exit(main())
