"""
Cancellation and deadlines for workflow runs.
"""

import threading
import time
from typing import Optional

from landingwise.errors import WorkflowCancelledError


class CancellationToken:
    """
    Cancel flag with an optional deadline, shared between a caller and one run.

    The caller may cancel from another thread; the workflow checks the token
    before every LLM call and passes the remaining time as the call timeout.
    """

    def __init__(self, timeout: Optional[float] = None):
        """
        Args:
            timeout: Seconds from now until the run is considered expired.
        """
        self._event = threading.Event()
        self._reason: Optional[str] = None
        self._deadline = time.monotonic() + timeout if timeout is not None else None

    def cancel(self, reason: str = "cancelled by caller"):
        if not self._event.is_set():
            self._reason = reason
            self._event.set()

    @property
    def expired(self) -> bool:
        return self._deadline is not None and time.monotonic() >= self._deadline

    @property
    def cancelled(self) -> bool:
        return self._event.is_set() or self.expired

    @property
    def reason(self) -> Optional[str]:
        if self._event.is_set():
            return self._reason
        if self.expired:
            return "deadline exceeded"
        return None

    def remaining(self) -> Optional[float]:
        """Seconds left before the deadline, or None without a deadline."""
        if self._deadline is None:
            return None
        return max(0.0, self._deadline - time.monotonic())

    def raise_if_cancelled(self):
        if self.cancelled:
            raise WorkflowCancelledError(self.reason)
