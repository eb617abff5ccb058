# app/tasks/scheduler.py
import logging

from apscheduler.schedulers.asyncio import AsyncIOScheduler

from app.core.config import settings
from app.tasks.settlement import settle_bets_job

logger = logging.getLogger(__name__)

scheduler = AsyncIOScheduler(timezone=settings.TZ)


def start_scheduler():
    """Settlement sweep: pays pending bets of draws whose results are in."""
    scheduler.add_job(
        settle_bets_job,
        "interval",
        seconds=settings.SETTLE_POLL_SECONDS,
        id="settle_bets_job",
        replace_existing=True,
        coalesce=True,          # merge piled-up triggers
        max_instances=1,        # never pay the same bet from two runs
        misfire_grace_time=10,
    )

    if not scheduler.running:
        scheduler.start()
        logger.info("Scheduler started")


def stop_scheduler():
    if scheduler.running:
        scheduler.shutdown(wait=False)
