"""Enable running litellm-status as a module: python -m litellm_status."""

import sys

from litellm_status.cli import main

if __name__ == "__main__":
    sys.exit(main())
