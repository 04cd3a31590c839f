"""
State management for the generation workflow.

Defines WorkflowState as a TypedDict. Each run owns its own state; the
errors channel uses an append-only reducer so nodes return only new entries.
"""

import operator
from typing import Annotated, List, Optional, TypedDict

from landingwise.models import GenerationContext
from landingwise.orchestration.cancellation import CancellationToken

MAX_ITERATIONS = 3


class WorkflowState(TypedDict, total=False):
    """
    State for one landing page generation run.

    All fields are optional (total=False) to allow incremental state updates.
    """

    # Input
    user_prompt: str
    context: GenerationContext
    system_prompt: Optional[str]  # Overrides the prompt built from context

    # Content and verdict
    generated_html: str
    is_valid: bool

    # Retry budget
    iterations: int
    max_iterations: int

    # Accumulated step errors, append-only
    errors: Annotated[List[str], operator.add]

    # Workflow control
    next_step: Optional[str]  # "VALIDATE" | "FINISH"
    run_id: Optional[str]
    cancel_token: Optional[CancellationToken]
