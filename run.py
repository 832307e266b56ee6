"""
Simple run script - reads symbol and API key from .env file.

Usage:
    python run.py                          # Fetch from Alpha Vantage and fit
    python run.py --json-path ibm.json     # Offline run on a saved payload
    python run.py --plot                   # Also save the price/volume chart

Config is read from .env (ALPHAVANTAGE_API_KEY, TICK_DIRECTION_SYMBOL).
"""

import sys
sys.path.insert(0, "src")

from tick_direction.cli import main


if __name__ == "__main__":
    sys.exit(main())
