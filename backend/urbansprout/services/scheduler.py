"""
Scheduled Tasks for UrbanSprout

Uses APScheduler to evict idle chatbot sessions periodically.
"""
import logging

from apscheduler.schedulers.asyncio import AsyncIOScheduler
from apscheduler.triggers.interval import IntervalTrigger

from urbansprout.services.session_store import SessionStore

logger = logging.getLogger(__name__)

# Create scheduler instance
scheduler = AsyncIOScheduler()


def run_session_sweep(store: SessionStore) -> int:
    """Evict expired chat sessions from ``store``."""
    try:
        evicted = store.sweep()
    except Exception as e:
        logger.error(f"Session sweep failed: {e}")
        return 0
    logger.debug(f"Session sweep complete. Evicted {evicted}, {len(store)} active.")
    return evicted


def start_scheduler(store: SessionStore, interval_seconds: int):
    """Start the APScheduler with the session sweep job."""
    if not scheduler.running:
        scheduler.add_job(
            run_session_sweep,
            trigger=IntervalTrigger(seconds=interval_seconds),
            args=[store],
            id="session_sweep",
            name="Chat session eviction",
            replace_existing=True,
        )
        scheduler.start()
        logger.info(f"Scheduler started with session sweep job (interval: {interval_seconds}s)")


def stop_scheduler():
    """Stop the APScheduler gracefully."""
    if scheduler.running:
        scheduler.shutdown(wait=False)
        logger.info("Scheduler stopped")
