"""Allow running the splitter via ``python -m splitter``."""
import sys

from splitter.main import main

if __name__ == "__main__":
    sys.exit(main())
