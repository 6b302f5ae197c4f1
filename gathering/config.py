import sys
from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict

# Log directory relative to the user's home, per platform
PLATFORM_LOG_DIRS: dict[str, str] = {
    "win32": "AppData/LocalLow/Wizards Of The Coast/MTGA",
}

DEFAULT_LOG_FILENAME = "output_log.txt"


class ConfigError(Exception):
    """Raised when configuration cannot be resolved."""


class Settings(BaseSettings):
    """Client settings loaded from environment.

    Constructed once at process start and passed to the publisher and job.
    """

    model_config = SettingsConfigDict(env_file=".env", env_prefix="GATHERING_", frozen=True)

    api_url: str = "http://localhost:8080"
    api_token: str = ""

    # Seconds
    client_timeout: float = 600.0
    upload_interval: float = 60.0

    log_dir: Path | None = None
    log_filename: str = DEFAULT_LOG_FILENAME
    upload_raw_on_start: bool = True

    def log_path(self, home: Path | None = None, platform: str | None = None) -> Path:
        """
        Resolve the full path of the client log file.

        Args:
            home: Home directory override (defaults to the current user's)
            platform: Platform override (defaults to sys.platform)

        Raises:
            ConfigError: If no log_dir is set and the platform has no known location
        """
        if self.log_dir is not None:
            return self.log_dir / self.log_filename

        platform = platform or sys.platform
        relative = PLATFORM_LOG_DIRS.get(platform)
        if relative is None:
            raise ConfigError(
                f"No log directory specified and the log location is unknown "
                f"on this platform: {platform!r}. Set GATHERING_LOG_DIR."
            )

        return (home or Path.home()) / relative / self.log_filename
