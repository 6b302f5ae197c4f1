"""
Parse the MTG Arena log and upload what it contains.

Each sync reads the whole log file, assembles a payload and publishes it.
Deciding when to sync (file watching, polling) belongs to the caller; this
job only throttles how often uploads happen.
"""

import asyncio
import logging
import time
from collections.abc import Callable
from pathlib import Path

from gathering.config import Settings
from gathering.services.assembler import assemble_payload
from gathering.services.publisher import HttpPublisher, PublishError, Publisher

logger = logging.getLogger(__name__)


class LogSyncJob:
    """
    Uploads parsed log data, at most once per settings.upload_interval.

    Calls must not overlap: run one sync at a time per log file.
    """

    def __init__(
        self,
        settings: Settings,
        publisher: Publisher,
        log_path: Path | None = None,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self._settings = settings
        self._publisher = publisher
        self._log_path = log_path or settings.log_path()
        self._clock = clock
        self._last_upload: float | None = None

    @property
    def log_path(self) -> Path:
        return self._log_path

    def read_log(self) -> str:
        """Read the complete current contents of the log file."""
        return self._log_path.read_text(encoding="utf-8", errors="replace")

    def _throttled(self) -> bool:
        if self._last_upload is None:
            return False
        return self._clock() - self._last_upload < self._settings.upload_interval

    async def sync(self, force: bool = False) -> bool:
        """
        Parse the log and publish the payload.

        Args:
            force: Upload even if the last upload was too recent

        Returns:
            True if a payload was uploaded
        """
        if not force and self._throttled():
            logger.debug("Log changed but uploaded too recently, skipping")
            return False

        try:
            raw = await asyncio.to_thread(self.read_log)
        except OSError as e:
            logger.error("Error reading log file %s: %s", self._log_path, e)
            return False

        payload = assemble_payload(raw)
        logger.info("Uploading payload with: %s", ", ".join(payload.found()) or "nothing")

        try:
            await self._publisher.publish(payload)
        except PublishError as e:
            logger.error("Error uploading data: %s", e)
            return False

        self._last_upload = self._clock()
        logger.info("Upload success")
        return True

    async def upload_raw(self) -> bool:
        """Upload the raw log file. Failures are logged, not raised."""
        try:
            await self._publisher.upload_log(self._log_path)
        except PublishError as e:
            logger.error("Error uploading file: %s", e)
            return False

        logger.info("File upload success")
        return True

    async def run_once(self) -> bool:
        """Optional raw upload, then a forced sync."""
        if self._settings.upload_raw_on_start:
            await self.upload_raw()
        return await self.sync(force=True)


async def run_sync(settings: Settings) -> bool:
    """Run a single sync pass with an HTTP publisher."""
    job = LogSyncJob(settings, HttpPublisher(settings))
    logger.info("Reading log file %s", job.log_path)
    return await job.run_once()


def main() -> None:
    """CLI entry point. Configuration comes from GATHERING_* environment variables."""
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    settings = Settings()
    asyncio.run(run_sync(settings))


if __name__ == "__main__":
    main()
