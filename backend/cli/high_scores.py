#!/usr/bin/env python3
"""
Show or reset the high score ledger.

Usage:
    python backend/cli/high_scores.py
    python backend/cli/high_scores.py --json
    python backend/cli/high_scores.py --reset [--confirm]
"""

import os
import sys
import json
import argparse
import logging

# Add parent directory to path to import backend modules
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from dotenv import load_dotenv

from data_access import HighScoreRepository
from database import get_database_path
from services.high_scores import HighScoreLedger

load_dotenv()

logging.basicConfig(
    level=os.getenv("LOG_LEVEL", "INFO").upper(),
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


def format_ledger(ledger: HighScoreLedger) -> str:
    if not ledger.entries:
        return "No high scores yet."
    lines = ["Rank  Name              Score"]
    for rank, entry in enumerate(ledger.entries, start=1):
        lines.append(f"{rank:>4}  {entry.name:<16}  {entry.score:>5}")
    return "\n".join(lines)


def reset_ledger(ledger: HighScoreLedger, confirm: bool = False) -> bool:
    if not confirm:
        print(f"Database path: {get_database_path()}")
        response = input("This deletes all high scores. Type 'RESET' to confirm: ")
        if response != 'RESET':
            print("Reset cancelled")
            return False
    ledger.reset()
    print("High scores cleared.")
    return True


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Show or reset the NeonSnake high scores.")
    parser.add_argument("--json", action="store_true", help="Print the ledger as JSON")
    parser.add_argument("--reset", action="store_true", help="Delete all high scores")
    parser.add_argument("--confirm", action="store_true", help="Skip the reset prompt")
    args = parser.parse_args(argv)

    ledger = HighScoreLedger(HighScoreRepository())

    if args.reset:
        return 0 if reset_ledger(ledger, confirm=args.confirm) else 1

    if args.json:
        print(json.dumps(ledger.to_list(), indent=2))
    else:
        print(format_ledger(ledger))
    return 0


if __name__ == "__main__":
    sys.exit(main())
