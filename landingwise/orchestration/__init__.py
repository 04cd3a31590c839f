"""
LangGraph orchestration for validated landing page generation.

This module provides a two-node workflow that generates a landing page,
checks it against structural heuristics and requests corrections until the
page passes or the iteration budget is spent.
"""

from landingwise.orchestration.cancellation import CancellationToken
from landingwise.orchestration.graph import (
    LandingPageWorkflow,
    create_landing_page_graph,
)
from landingwise.orchestration.state import MAX_ITERATIONS, WorkflowState
from landingwise.orchestration.utils import (
    build_result,
    create_initial_state,
    get_state_summary,
)

__all__ = [
    "CancellationToken",
    "LandingPageWorkflow",
    "create_landing_page_graph",
    "MAX_ITERATIONS",
    "WorkflowState",
    "build_result",
    "create_initial_state",
    "get_state_summary",
]
