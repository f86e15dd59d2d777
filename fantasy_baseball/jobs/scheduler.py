"""
Player sync scheduler — APScheduler wrapper for the nightly roster sync.

max_instances=1 prevents overlapping syncs; a failed run is logged and the
next scheduled run retries.
"""

from __future__ import annotations

import logging
from datetime import UTC, datetime
from typing import TYPE_CHECKING

from apscheduler.schedulers.asyncio import AsyncIOScheduler
from apscheduler.triggers.cron import CronTrigger

from fantasy_baseball.jobs.sync import sync_players

if TYPE_CHECKING:
    from fantasy_baseball.context import AppContext

logger = logging.getLogger(__name__)

JOB_ID = "sync-players"


class PlayerSyncScheduler:
    def __init__(self, ctx: AppContext) -> None:
        self.ctx = ctx
        self.scheduler = AsyncIOScheduler(timezone=ctx.config.sync.timezone)

    @property
    def running(self) -> bool:
        return self.scheduler.running

    def start(self) -> None:
        """Register the cron job (when enabled) and start the scheduler."""
        cfg = self.ctx.config.sync
        if cfg.enabled:
            trigger = CronTrigger.from_crontab(cfg.cron, timezone=cfg.timezone)
            self.scheduler.add_job(
                self.run_job,
                trigger=trigger,
                id=JOB_ID,
                name=JOB_ID,
                max_instances=1,
                coalesce=True,
                misfire_grace_time=300,
                replace_existing=True,
            )
            logger.info("Player sync job scheduled (%s %s)", cfg.cron, cfg.timezone)
        else:
            logger.info("Player sync schedule disabled")
        self.scheduler.start()

    def shutdown(self) -> None:
        if self.scheduler.running:
            self.scheduler.shutdown(wait=False)
            logger.info("Player sync scheduler stopped")

    def trigger_now(self) -> None:
        """Queue an immediate sync. Reuses the cron job so runs never overlap."""
        job = self.scheduler.get_job(JOB_ID)
        if job is not None:
            job.modify(next_run_time=datetime.now(UTC))
        else:
            self.scheduler.add_job(
                self.run_job,
                id=JOB_ID,
                name=JOB_ID,
                max_instances=1,
            )
        logger.info("Player sync queued")

    async def run_job(self) -> int | None:
        """Scheduled entry point. Never raises."""
        try:
            return await sync_players(self.ctx)
        except Exception:
            logger.exception("Player sync failed")
            return None
