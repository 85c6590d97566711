"""
Run with: python -m tiptime
"""
import sys

from tiptime.main import main

if __name__ == "__main__":
    sys.exit(main())
