#!/usr/bin/env python3
"""
outfmt - Checkout Entry Point
==============================
Run the outfmt CLI from a source checkout, without installing it.

Usage:
    python run.py render services.json            # Table
    python run.py render services.json -f csv     # CSV with a label line
    python run.py formats                         # Available formats
"""

import sys
from pathlib import Path

CHECKOUT = Path(__file__).resolve().parent


def main():
    """Put the checkout on sys.path and hand over to the CLI"""
    if str(CHECKOUT) not in sys.path:
        sys.path.insert(0, str(CHECKOUT))

    try:
        from outfmt.cli.main import main_entry
    except ImportError as e:
        print(f"Cannot start outfmt: {e}", file=sys.stderr)
        print("Install it with `pip install -e .` (needs rich, typer and PyYAML)", file=sys.stderr)
        sys.exit(1)

    main_entry()


if __name__ == "__main__":
    main()
