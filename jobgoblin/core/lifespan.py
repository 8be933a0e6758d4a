import asyncio
import contextlib
import logging
from contextlib import asynccontextmanager

from jobgoblin.analytics.db import init_db, purge_old_records
from jobgoblin.core.config import settings
from jobgoblin.core.tempfiles import sweep_stale_temp_files

logger = logging.getLogger(__name__)

MAINTENANCE_INTERVAL_S = 3600


def run_maintenance() -> None:
    """Hourly housekeeping: analytics retention and stale upload files."""
    deleted = purge_old_records()
    if any(deleted.values()):
        logger.info("analytics_retention_purge deleted=%s", deleted)
    swept = sweep_stale_temp_files(settings.temp_dir)
    if swept:
        logger.info("temp_files_swept count=%s dir=%s", swept, settings.temp_dir)


@asynccontextmanager
async def lifespan(app):
    init_db()
    run_maintenance()

    stop_event = asyncio.Event()

    async def maintenance_loop() -> None:
        while True:
            try:
                await asyncio.wait_for(stop_event.wait(), timeout=MAINTENANCE_INTERVAL_S)
                return
            except asyncio.TimeoutError:
                pass
            try:
                await asyncio.to_thread(run_maintenance)
            except Exception as exc:  # noqa: BLE001
                logger.warning("maintenance_failed: %s", exc)

    task = asyncio.create_task(maintenance_loop())
    yield
    stop_event.set()
    if not task.done():
        task.cancel()
        with contextlib.suppress(asyncio.CancelledError):
            await task
