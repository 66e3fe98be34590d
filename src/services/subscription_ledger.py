"""In-memory subscription ledger for the tips mailing list."""

import threading
import uuid

from src.models import session_state
from src.models.session_state import LedgerState, SubmissionOutcome
from src.services.task_scheduler import TaskScheduler
from src.utils.config import config
from src.utils.logger import StructuredLogger


class SubscriptionError(ValueError):
    """Base class for rejected subscription attempts."""

    outcome: SubmissionOutcome

    def __init__(self, candidate: str):
        super().__init__(self.outcome.message)
        self.candidate = candidate

    @property
    def user_message(self) -> str:
        return self.outcome.message


class InvalidEmailFormatError(SubscriptionError):
    """Raised when the candidate is empty or has no '@'."""

    outcome = SubmissionOutcome.INVALID_FORMAT


class DuplicateSubscriptionError(SubscriptionError):
    """Raised when the candidate is already subscribed."""

    outcome = SubmissionOutcome.DUPLICATE


_ERRORS = {
    SubmissionOutcome.INVALID_FORMAT: InvalidEmailFormatError,
    SubmissionOutcome.DUPLICATE: DuplicateSubscriptionError,
}


class SubscriptionLedger:
    """Validates and records subscriber emails for the session lifetime."""

    STATUS_CLEAR_JOB_PREFIX = "status_clear:"

    def __init__(self, task_scheduler: TaskScheduler, clear_after_seconds: float | None = None):
        """
        Initialize the ledger.

        Args:
            task_scheduler: Scheduler that runs the status auto-dismiss
            clear_after_seconds: Status message lifetime (defaults to STATUS_CLEAR_DELAY_MS)
        """
        self.task_scheduler = task_scheduler
        self.clear_after_seconds = clear_after_seconds or config.subscription.status_clear_seconds
        self.logger = StructuredLogger("SubscriptionLedger")
        self._state = LedgerState()
        self._lock = threading.RLock()

    @property
    def state(self) -> LedgerState:
        with self._lock:
            return self._state

    @property
    def emails(self) -> list[str]:
        return list(self.state.emails)

    def submit(self, candidate: str) -> str:
        """
        Subscribe an email address.

        Every attempt sets the status message and schedules its removal.
        Pending removals from earlier attempts are left in place.

        Args:
            candidate: Email address as typed

        Returns:
            The success message

        Raises:
            InvalidEmailFormatError: If the candidate is empty or has no '@'
            DuplicateSubscriptionError: If the candidate is already subscribed
        """
        with self._lock:
            self._state, outcome = session_state.submit_email(self._state, candidate)
            count = self._state.count

        self.task_scheduler.schedule_once(
            f"{self.STATUS_CLEAR_JOB_PREFIX}{uuid.uuid4()}",
            self.clear_status,
            self.clear_after_seconds,
            name="Clear Subscription Status",
        )

        if outcome is not SubmissionOutcome.SUBSCRIBED:
            self.logger.info(
                "Subscription rejected",
                context={"outcome": outcome.value, "subscribers": count},
            )
            raise _ERRORS[outcome](candidate)

        self.logger.info("Subscriber added", context={"subscribers": count})
        return outcome.message

    def clear_status(self) -> None:
        """Timer callback: remove the status message."""
        with self._lock:
            self._state = session_state.clear_status(self._state)

    def teardown(self) -> None:
        """Cancel every pending status removal."""
        cancelled = self.task_scheduler.cancel_prefix(self.STATUS_CLEAR_JOB_PREFIX)
        if cancelled:
            self.logger.info("Cleared pending status timers", context={"cancelled": cancelled})
