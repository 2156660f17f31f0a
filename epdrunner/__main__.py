"""
Entry point for running the epdrunner package as a module.

Usage:
    python -m epdrunner --help
    python -m epdrunner ./stockfish --epdpath wac.epd --go "depth 12" --earlypass
"""

from epdrunner.cli import main

if __name__ == "__main__":
    main()
