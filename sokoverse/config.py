"""
Sokoverse Configuration

Loads configuration from environment variables with sensible defaults.
"""

import os
from pathlib import Path
from dotenv import load_dotenv

# Load .env file if it exists
load_dotenv()

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")
_TRUE_VALUES = ("1", "true", "yes", "on")
_FALSE_VALUES = ("0", "false", "no", "off")


def _parse_bool(raw: str) -> bool:
    value = raw.strip().lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    raise ValueError(f"Expected a boolean value, got {raw!r}")


class Config:
    """Application configuration loaded from environment variables."""

    # Project Paths
    PROJECT_ROOT: Path = Path(__file__).parent.parent
    LEVELS_DIR: Path = Path(
        os.getenv("SOKOVERSE_LEVELS_DIR", str(PROJECT_ROOT / "examples" / "levels"))
    )
    LEVELS_PATH: Path = Path(
        os.getenv("SOKOVERSE_LEVELS_PATH", str(LEVELS_DIR / "starter.txt"))
    )

    # Level parsing: reject blocks without exactly one pusher
    VALIDATE_LEVELS_RAW: str = os.getenv("SOKOVERSE_VALIDATE_LEVELS", "true")

    # Logging
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")

    @classmethod
    def validate_levels(cls) -> bool:
        return _parse_bool(cls.VALIDATE_LEVELS_RAW)

    @classmethod
    def validate(cls) -> None:
        """Validate configuration and raise errors if values are malformed."""
        if cls.LOG_LEVEL.upper() not in LOG_LEVELS:
            raise ValueError(
                f"LOG_LEVEL must be one of {', '.join(LOG_LEVELS)}, got {cls.LOG_LEVEL!r}"
            )

        # Raises ValueError on anything that is not a recognizable boolean
        cls.validate_levels()

    @classmethod
    def display(cls) -> str:
        """Return a formatted string showing current configuration."""
        lines = [
            "Sokoverse Configuration:",
            f"  Levels Dir: {cls.LEVELS_DIR}",
            f"  Level Pack: {cls.LEVELS_PATH}",
            f"  Validate Levels: {cls.VALIDATE_LEVELS_RAW}",
            f"  Log Level: {cls.LOG_LEVEL}",
        ]
        return "\n".join(lines)
