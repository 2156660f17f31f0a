"""
EPD test-suite runner for UCI chess engines.

Usage:
    python -m epdrunner --help
    python -m epdrunner ./engine --epdpath wac.epd
    python -m epdrunner ./engine --epdpath wac.epd --option Hash=64 --earlypass
    python -m epdrunner ./engine --inbuilt zugts
"""

from epdrunner.constants import (
    DEFAULT_GO_COMMAND,
    NEUTRAL_COUNTERS,
)
from epdrunner.epd import EpdPosition, RunOutcome

__all__ = [
    # Constants
    'DEFAULT_GO_COMMAND',
    'NEUTRAL_COUNTERS',
    # Data classes
    'EpdPosition',
    'RunOutcome',
    # Suite functions (import from epdrunner.suite when needed)
    # - run_suite, run_positions
]
