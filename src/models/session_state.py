"""Immutable tip board and subscription state with pure transitions.

Services hold the current state and replace it with the result of these
functions; nothing here touches timers, the network or the page.
"""

from dataclasses import dataclass, replace
from enum import Enum
from typing import Any, Iterable

from src.models.trading_tip import TipRecord


@dataclass(frozen=True)
class RotationState:
    """The active tip list and which tip is displayed."""

    tips: tuple[TipRecord, ...] = ()
    current_index: int = 0
    loading: bool = True

    @property
    def count(self) -> int:
        return len(self.tips)

    @property
    def rotation_active(self) -> bool:
        """Rotation only runs with more than one tip."""
        return len(self.tips) > 1

    def current_tip(self) -> TipRecord | None:
        """Return the displayed tip, or None when no entry is addressed."""
        if 0 <= self.current_index < len(self.tips):
            return self.tips[self.current_index]
        return None

    def to_dict(self) -> dict[str, Any]:
        current = self.current_tip()
        return {
            "tips": [tip.to_dict() for tip in self.tips],
            "current_index": self.current_index,
            "current_tip": current.to_dict() if current else None,
            "loading": self.loading,
            "count": self.count,
        }


def begin_loading(state: RotationState) -> RotationState:
    return replace(state, loading=True)


def replace_tips(state: RotationState, tips: Iterable[TipRecord]) -> RotationState:
    """Swap in a new tip list wholesale; the index is carried over as is."""
    return replace(state, tips=tuple(tips), loading=False)


def advance(state: RotationState) -> RotationState:
    if not state.tips:
        return state
    return replace(state, current_index=(state.current_index + 1) % len(state.tips))


def select(state: RotationState, index: int) -> RotationState:
    return replace(state, current_index=index)


class SubmissionOutcome(str, Enum):
    """Result of a subscription attempt."""

    SUBSCRIBED = "subscribed"
    INVALID_FORMAT = "invalid_format"
    DUPLICATE = "duplicate"

    @property
    def message(self) -> str:
        """User-facing status message for this outcome."""
        return STATUS_MESSAGES[self]


STATUS_MESSAGES = {
    SubmissionOutcome.SUBSCRIBED: "✅ Successfully subscribed! You'll receive trading tips.",
    SubmissionOutcome.INVALID_FORMAT: "❌ Please enter a valid email address.",
    SubmissionOutcome.DUPLICATE: "📧 This email is already subscribed!!",
}


@dataclass(frozen=True)
class LedgerState:
    """Subscriber emails plus the form's input and status message."""

    emails: tuple[str, ...] = ()
    pending_input: str = ""
    status_message: str = ""

    @property
    def count(self) -> int:
        return len(self.emails)

    def to_dict(self) -> dict[str, Any]:
        return {
            "emails": list(self.emails),
            "count": self.count,
            "pending_input": self.pending_input,
            "status_message": self.status_message,
        }


def is_valid_email(candidate: str | None) -> bool:
    """Accept any non-empty string containing an '@'."""
    return bool(candidate) and "@" in candidate


def submit_email(state: LedgerState, candidate: str) -> tuple[LedgerState, SubmissionOutcome]:
    """
    Apply a subscription attempt.

    Args:
        state: Current ledger state
        candidate: Email address as typed

    Returns:
        Tuple of (new_state, outcome). Rejected candidates stay in the input.
    """
    if not is_valid_email(candidate):
        outcome = SubmissionOutcome.INVALID_FORMAT
        return replace(state, pending_input=candidate or "", status_message=outcome.message), outcome

    if candidate in state.emails:
        outcome = SubmissionOutcome.DUPLICATE
        return replace(state, pending_input=candidate, status_message=outcome.message), outcome

    outcome = SubmissionOutcome.SUBSCRIBED
    new_state = replace(
        state,
        emails=state.emails + (candidate,),
        pending_input="",
        status_message=outcome.message,
    )
    return new_state, outcome


def clear_status(state: LedgerState) -> LedgerState:
    return replace(state, status_message="")
