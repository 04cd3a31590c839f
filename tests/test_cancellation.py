"""
Tests for CancellationToken.
"""

import threading

import pytest

from landingwise.errors import WorkflowCancelledError
from landingwise.orchestration import CancellationToken


def test_fresh_token_is_not_cancelled():
    token = CancellationToken()
    assert not token.cancelled
    assert token.reason is None
    assert token.remaining() is None
    token.raise_if_cancelled()


def test_cancel_keeps_first_reason():
    token = CancellationToken()
    token.cancel("first")
    token.cancel("second")

    assert token.cancelled
    assert token.reason == "first"


def test_zero_timeout_expires_immediately():
    token = CancellationToken(timeout=0)

    assert token.expired
    assert token.cancelled
    assert token.reason == "deadline exceeded"
    assert token.remaining() == 0.0


def test_remaining_counts_down_from_timeout():
    token = CancellationToken(timeout=30)
    assert 0 < token.remaining() <= 30
    assert not token.expired


def test_raise_if_cancelled():
    token = CancellationToken()
    token.cancel()

    with pytest.raises(WorkflowCancelledError, match="cancelled by caller"):
        token.raise_if_cancelled()


def test_cancel_from_another_thread():
    token = CancellationToken()
    thread = threading.Thread(target=token.cancel, args=("from worker",))
    thread.start()
    thread.join()

    assert token.cancelled
    assert token.reason == "from worker"
