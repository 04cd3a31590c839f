"""
Shared fixtures: a scripted generation client and sample documents.
"""

import pytest

from landingwise.utils.llm_logger import get_logger

VALID_HTML = """<!DOCTYPE html>
<html lang="en">
<head>
    <script src="https://cdn.tailwindcss.com"></script>
</head>
<body class="bg-white">
    <form data-waitlist="true">
        <input type="email" name="email">
        <button type="submit">Join</button>
    </form>
</body>
</html>"""

INVALID_HTML = "<div><h1>Launching soon</h1></div>"


class ScriptedClient:
    """Returns (or raises) scripted replies; the last one repeats forever."""

    def __init__(self, replies, on_call=None):
        self.replies = list(replies)
        self.calls = []
        self.on_call = on_call

    def invoke(self, messages, component="generator", run_id=None, timeout=None):
        self.calls.append({
            "messages": messages,
            "component": component,
            "run_id": run_id,
            "timeout": timeout,
        })
        if self.on_call:
            self.on_call(len(self.calls))

        reply = self.replies.pop(0) if len(self.replies) > 1 else self.replies[0]
        if isinstance(reply, Exception):
            raise reply
        return reply


@pytest.fixture
def valid_html():
    return VALID_HTML


@pytest.fixture
def invalid_html():
    return INVALID_HTML


@pytest.fixture
def scripted_client():
    """Factory for ScriptedClient instances."""
    return ScriptedClient


@pytest.fixture(autouse=True)
def quiet_llm_logger():
    """Keep the shared LLM logger silent unless a test opts in."""
    logger = get_logger()
    logger.configure(level="NONE", log_to_file=False)
    yield logger
    logger.configure(level="NONE", log_to_file=False)
