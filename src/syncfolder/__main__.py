import sys

from syncfolder.cli import main

sys.exit(main())
