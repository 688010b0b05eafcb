"""
DevWatch Configuration Module.

Process settings come from the environment via Pydantic Settings; the
directory list comes from an optional JSON file loaded once at startup.
Requires Python 3.11+.
"""

import json
from enum import Enum
from functools import lru_cache
from pathlib import Path
from typing import Annotated

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict

# Load .env file into os.environ at module import time
# This ensures nested BaseSettings classes can read the values
_env_file = Path(__file__).parent.parent / ".env"
if _env_file.exists():
    load_dotenv(_env_file)
else:
    # Try current working directory
    load_dotenv()


DEFAULT_IGNORE_PATTERNS = [
    "__pycache__",
    ".git",
    ".hg",
    ".svn",
    ".venv",
    "venv",
    "node_modules",
    ".pytest_cache",
    ".mypy_cache",
    ".ruff_cache",
    ".tox",
]


def _split_csv(v: str | list[str]) -> list[str]:
    if isinstance(v, str):
        return [p.strip() for p in v.split(",") if p.strip()]
    return v


class DiffPolicy(str, Enum):
    """How a pair of generations is turned into change events."""

    SINGLE_BRANCH = "single_branch"
    THREE_WAY = "three_way"


class ConfigError(ValueError):
    """Raised when the watch configuration file exists but cannot be used."""


class WatcherSettings(BaseSettings):
    """Watch loop configuration settings."""

    model_config = SettingsConfigDict(env_prefix="WATCHER_")

    interval_seconds: float = Field(default=1.0, gt=0.0, description="Sleep between ticks")
    config_file: Path = Field(default=Path("watch.json"), description="Watch configuration file")
    command: str = Field(default="python main.py", description="Entry-point command")
    extensions: Annotated[list[str], NoDecode] = Field(default=[".py"], description="Monitored file suffixes")
    ignore_patterns: Annotated[list[str], NoDecode] = Field(
        default=DEFAULT_IGNORE_PATTERNS,
        description="Path component names or glob patterns skipped while scanning",
    )
    diff_policy: DiffPolicy = Field(
        default=DiffPolicy.SINGLE_BRANCH, description="Change classification policy"
    )
    clear_screen: bool = Field(default=True)

    @field_validator("extensions", "ignore_patterns", mode="before")
    @classmethod
    def parse_list(cls, v: str | list[str]) -> list[str]:
        """Parse lists from comma-separated string or list."""
        return _split_csv(v)


class LoggingSettings(BaseSettings):
    """Logging configuration settings."""

    model_config = SettingsConfigDict(env_prefix="LOG_")

    level: str = Field(default="INFO")
    format: str = Field(default="console")  # "json" or "console"
    file_path: Path | None = Field(default=None)


class Settings(BaseSettings):
    """Main application settings aggregating all sub-settings."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application metadata
    app_name: str = Field(default="DevWatch")
    app_version: str = Field(default="0.1.0")
    environment: str = Field(default="development")

    # Sub-settings
    watcher: WatcherSettings = Field(default_factory=WatcherSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """
    Get cached application settings.

    Returns singleton instance of Settings for performance.
    """
    return Settings()


class WatchConfig(BaseModel):
    """
    Directories to watch, fixed for the lifetime of the process.

    Mirrors the JSON file layout; unknown keys are dropped rather than
    rejected so the file can carry settings for other tools.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    directories: tuple[str, ...] = ()
    ignore: tuple[str, ...] = ()
    command: str | None = None
    extensions: tuple[str, ...] | None = None

    @property
    def exists(self) -> bool:
        """Check if there is at least one directory to watch."""
        return len(self.directories) > 0

    def with_directories(self, directories: list[str]) -> "WatchConfig":
        """Return a copy whose directory list is replaced, not merged."""
        return self.model_copy(update={"directories": tuple(directories)})


def load_watch_config(path: Path) -> WatchConfig:
    """
    Load the watch configuration file.

    Args:
        path: Location of the JSON file

    Returns:
        The parsed configuration, or an empty one if the file is absent

    Raises:
        ConfigError: If the file cannot be read or does not match the schema
    """
    if not path.is_file():
        return WatchConfig()

    try:
        raw = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
        raise ConfigError(f"{path}: {e}") from e

    if not isinstance(raw, dict) or "directories" not in raw:
        raise ConfigError(f"{path}: expected an object with a 'directories' list")

    try:
        return WatchConfig.model_validate(raw)
    except ValidationError as e:
        raise ConfigError(f"{path}: {e}") from e
