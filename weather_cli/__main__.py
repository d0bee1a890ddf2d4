import sys

from weather_cli.main import main

sys.exit(main())
