import sys
from diskreport.cli import main

sys.exit(main())
