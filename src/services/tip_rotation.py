"""Tip rotation controller for the tip board."""

import threading
from typing import Iterable

from src.models import session_state
from src.models.session_state import RotationState
from src.models.trading_tip import TipRecord
from src.services.quote_client import QuoteClient
from src.services.task_scheduler import TaskScheduler
from src.services.tip_fallback import FALLBACK_TIPS
from src.utils.config import config
from src.utils.logger import StructuredLogger


class TipRotationController:
    """Holds the active tip list and cycles through it on a timer."""

    ROTATION_JOB_ID = "tip_rotation"

    def __init__(
        self,
        quote_client: QuoteClient,
        task_scheduler: TaskScheduler,
        interval_seconds: float | None = None,
    ):
        """
        Initialize the controller.

        Args:
            quote_client: Source of live tips
            task_scheduler: Scheduler that runs the rotation timer
            interval_seconds: Rotation period (defaults to TIP_ROTATION_INTERVAL_MS)
        """
        self.quote_client = quote_client
        self.task_scheduler = task_scheduler
        self.interval_seconds = interval_seconds or config.rotation.interval_seconds
        self.logger = StructuredLogger("TipRotationController")
        self._state = RotationState()
        self._lock = threading.RLock()
        self._closed = False

    @property
    def state(self) -> RotationState:
        with self._lock:
            return self._state

    def current_tip(self) -> TipRecord | None:
        return self.state.current_tip()

    async def initialize(self) -> None:
        """Load live tips, falling back to the sample set when none arrive."""
        with self._lock:
            self._state = session_state.begin_loading(self._state)

        tips = await self.quote_client.fetch_tips()
        if tips:
            self.logger.info("Using live tips", context={"count": len(tips)})
        else:
            self.logger.warning(
                "No live tips available, using sample tips",
                context={"count": len(FALLBACK_TIPS)},
            )
            tips = FALLBACK_TIPS

        self.replace_tips(tips)

    def replace_tips(self, tips: Iterable[TipRecord]) -> None:
        """Swap in a new tip list and re-arm the rotation timer for it."""
        with self._lock:
            if self._closed:
                self.logger.info("Discarding tips delivered after teardown")
                return
            self._state = session_state.replace_tips(self._state, tips)
            self._arm_rotation()

    def advance(self) -> None:
        """Timer callback: show the next tip, wrapping at the end."""
        with self._lock:
            previous = self._state.current_index
            self._state = session_state.advance(self._state)
            self.logger.debug(
                "Rotated tip",
                context={"from": previous, "to": self._state.current_index},
            )

    def select(self, index: int) -> None:
        """Show the tip at index, as chosen by the user."""
        with self._lock:
            self._state = session_state.select(self._state, index)

    def teardown(self) -> None:
        """Cancel the rotation timer; later tip deliveries are ignored."""
        with self._lock:
            self._closed = True
            if self.task_scheduler.cancel(self.ROTATION_JOB_ID):
                self.logger.info("Cleared tip rotation timer")

    def _arm_rotation(self) -> None:
        self.task_scheduler.cancel(self.ROTATION_JOB_ID)
        count = self._state.count
        if not self._state.rotation_active:
            self.logger.info("Not rotating tips", context={"count": count})
            return

        self.task_scheduler.schedule_interval(
            self.ROTATION_JOB_ID,
            self.advance,
            self.interval_seconds,
            name="Tip Rotation",
        )
        self.logger.info(
            "Armed tip rotation",
            context={"count": count, "interval_seconds": self.interval_seconds},
        )
