"""
Run configuration and environment defaults.
"""

import os
from dataclasses import dataclass, field
from pathlib import Path

from dotenv import load_dotenv

from epdrunner.constants import DEFAULT_GO_COMMAND, INBUILT_SUITES
from epdrunner.errors import ConfigurationError

# Load environment variables
load_dotenv(Path(__file__).parent.parent / '.env')


def get_default_engine() -> str | None:
    """Engine command from EPD_ENGINE, if set."""
    return os.environ.get("EPD_ENGINE") or None


def get_default_go_command() -> str:
    """`go` parameters from EPD_GO, falling back to a fixed move time."""
    return os.environ.get("EPD_GO") or DEFAULT_GO_COMMAND


def get_suites_dir() -> Path:
    """Get the directory holding the inbuilt EPD suites."""
    # Allow override via environment variable
    if os.environ.get("EPD_SUITES_DIR"):
        return Path(os.environ["EPD_SUITES_DIR"])
    # Default to epds/ inside the package
    return Path(__file__).parent / "epds"


def inbuilt_suite_path(name: str) -> Path:
    """
    Resolve an inbuilt suite name or alias to its EPD file.

    Raises:
        ConfigurationError: if the name is unknown or the suite file is not installed
    """
    filename = INBUILT_SUITES.get(name)
    if filename is None:
        raise ConfigurationError(f"Invalid inbuilt EPD: {name}")
    path = get_suites_dir() / filename
    if not path.is_file():
        raise ConfigurationError(
            f"Inbuilt suite {name} is not installed (expected {path}, set EPD_SUITES_DIR to change)"
        )
    return path


@dataclass
class RunConfig:
    """Everything needed to run one suite against one engine."""
    engine: str | list[str]
    epd_file: Path
    options: list[str] = field(default_factory=list)  # NAME=VALUE strings
    go_command: str = DEFAULT_GO_COMMAND
    early_pass: bool = False
    verbose: bool = False
    debug: bool = False
    colour: bool = True
