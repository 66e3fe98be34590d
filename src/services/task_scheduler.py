"""Scheduler service for the board's cancellable timed tasks."""

import logging
from datetime import datetime, timedelta, timezone
from typing import Callable

from apscheduler.jobstores.base import JobLookupError
from apscheduler.schedulers.background import BackgroundScheduler
from apscheduler.triggers.date import DateTrigger
from apscheduler.triggers.interval import IntervalTrigger

logger = logging.getLogger(__name__)


class TaskScheduler:
    """
    Runs recurring and one-shot tasks on a background scheduler.

    Components register tasks under ids they own and cancel them on
    teardown. Jobs added before start() are held until the scheduler runs.
    """

    def __init__(self, scheduler: BackgroundScheduler | None = None):
        """
        Initialize the task scheduler.

        Args:
            scheduler: Optional APScheduler instance (a BackgroundScheduler by default)
        """
        self.scheduler = scheduler or BackgroundScheduler(timezone=timezone.utc)
        self.is_running = False

    def start(self) -> None:
        """Start executing scheduled tasks."""
        if not self.is_running:
            self.scheduler.start()
            self.is_running = True
            logger.info("Task scheduler started")

    def stop(self) -> None:
        """Stop the scheduler without waiting for running tasks."""
        if self.is_running:
            self.scheduler.shutdown(wait=False)
            self.is_running = False
            logger.info("Task scheduler stopped")

    def schedule_interval(
        self, job_id: str, func: Callable[[], None], seconds: float, name: str | None = None
    ) -> None:
        """
        Register a recurring task, replacing any task with the same id.

        Args:
            job_id: Id the owning component uses to cancel the task
            func: Callable run on every tick
            seconds: Period between ticks
            name: Optional human-readable job name
        """
        if seconds <= 0:
            raise ValueError(f"Interval must be positive: {seconds}")

        # Jobs held before start() are not deduplicated by APScheduler
        self.cancel(job_id)
        self.scheduler.add_job(
            func,
            IntervalTrigger(seconds=seconds),
            id=job_id,
            name=name or job_id,
            replace_existing=True,
            coalesce=True,
            max_instances=1,
        )
        logger.debug(f"Scheduled recurring task {job_id} every {seconds}s")

    def schedule_once(
        self, job_id: str, func: Callable[[], None], delay_seconds: float, name: str | None = None
    ) -> None:
        """
        Register a task that runs once after a delay.

        Args:
            job_id: Id the owning component uses to cancel the task
            func: Callable to run
            delay_seconds: Delay before the task runs
            name: Optional human-readable job name
        """
        run_date = datetime.now(timezone.utc) + timedelta(seconds=delay_seconds)
        self.cancel(job_id)
        self.scheduler.add_job(
            func,
            DateTrigger(run_date=run_date),
            id=job_id,
            name=name or job_id,
            replace_existing=True,
            misfire_grace_time=None,
        )
        logger.debug(f"Scheduled one-shot task {job_id} in {delay_seconds}s")

    def cancel(self, job_id: str) -> bool:
        """
        Cancel a task if it is still pending.

        Returns:
            True if a task was removed
        """
        try:
            self.scheduler.remove_job(job_id)
        except JobLookupError:
            return False
        logger.debug(f"Cancelled task {job_id}")
        return True

    def cancel_prefix(self, prefix: str) -> int:
        """
        Cancel every pending task whose id starts with prefix.

        Returns:
            Number of tasks removed
        """
        removed = 0
        for job_id in self.job_ids():
            if job_id.startswith(prefix) and self.cancel(job_id):
                removed += 1
        return removed

    def has_job(self, job_id: str) -> bool:
        return self.scheduler.get_job(job_id) is not None

    def job_ids(self) -> list[str]:
        return [job.id for job in self.scheduler.get_jobs()]
