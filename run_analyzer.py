"""
Orders Analyzer runner.

Usage:
    poetry run python run_analyzer.py    # reads ./source.txt
"""

import sys

from orders_analyzer.main import main

if __name__ == "__main__":
    sys.exit(main())
