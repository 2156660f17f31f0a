"""
Constants for the EPD test-suite runner.
"""

# Search parameters sent with `go` when none are configured
DEFAULT_GO_COMMAND = "movetime 1000"

# EPD records carry no move counters, so every FEN gets these
NEUTRAL_COUNTERS = "0 1"

# UCI vocabulary
UCI_READY_TOKEN = "readyok"
UCI_BESTMOVE_TOKEN = "bestmove"
UCI_PV_TOKEN = "pv"

# Terminal colours
CONTROL_GREY = "\u001b[38;5;243m"
CONTROL_GREEN = "\u001b[32m"
CONTROL_RED = "\u001b[31m"
CONTROL_RESET = "\u001b[0m"

# Seconds to wait for the engine to exit after `quit` before terminating it
ENGINE_EXIT_TIMEOUT = 5

# Inbuilt suites: CLI name (and alias) to file name in the suites directory
INBUILT_SUITES = {
    "winatchess": "wac.epd",
    "wac": "wac.epd",
    "zugzwangs": "zugts.epd",
    "zugts": "zugts.epd",
    "tablebases": "tbtest.epd",
    "tbs": "tbtest.epd",
}

# Suite run when neither an EPD path nor an inbuilt suite is given
DEFAULT_INBUILT_SUITE = "winatchess"
