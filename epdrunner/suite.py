"""
Running an EPD suite against an engine.
"""

from typing import Callable

from epdrunner.config import RunConfig
from epdrunner.driver import UciSession, parse_option
from epdrunner.engine import open_engine
from epdrunner.epd import EpdPosition
from epdrunner.parser import EpdParser, load_epd_file
from epdrunner.report import Scoreboard


def run_positions(session: UciSession, positions: list[EpdPosition], scoreboard: Scoreboard,
                  go_command: str, early_pass: bool = False,
                  echo: Callable[[str], None] = print) -> Scoreboard:
    """
    Search each position in order, scoring and echoing every result.

    Each position is finished, including any early-pass stop, before the
    next one is sent.
    """
    for position in positions:
        outcome = session.solve(position, go_command, early_pass)
        echo(scoreboard.record(position, outcome))
    return scoreboard


def run_suite(config: RunConfig) -> Scoreboard:
    """
    Run a whole EPD suite against one engine and print the report.

    The EPD file and the options are fully validated before the engine is
    started, so a bad suite never reaches the engine.

    Args:
        config: engine command, EPD file and run switches

    Returns:
        The Scoreboard holding every outcome
    """
    positions = EpdParser().parse_text(load_epd_file(config.epd_file))
    for option in config.options:
        parse_option(option)

    scoreboard = Scoreboard(positions, colour=config.colour)

    on_line = None
    if config.verbose:
        def on_line(position, line):
            print(scoreboard.verbose_line(position, line))

    with open_engine(config.engine, debug=config.debug, on_line=on_line) as session:
        session.initialize()
        session.set_options(config.options)
        scoreboard.start()
        run_positions(session, positions, scoreboard, config.go_command, config.early_pass)
        session.quit()

    for line in scoreboard.summary():
        print(line)
    return scoreboard
