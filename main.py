import sys
from fingerrunner.main import main

# ==============================================================================
#                       FINGER RUNNER LAUNCHER
# ==============================================================================
if __name__ == "__main__":
    sys.exit(main())
