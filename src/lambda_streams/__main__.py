"""Entry point for ``python -m lambda_streams``."""

import sys

from lambda_streams.cli import main

if __name__ == "__main__":
    sys.exit(main())
