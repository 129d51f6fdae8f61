import sys

from src.pipeline.runner import main

sys.exit(main())
