"""
Utility functions for the generation workflow.
"""

from typing import Optional

from landingwise.models import GenerationContext, GenerationResult
from landingwise.orchestration.cancellation import CancellationToken
from landingwise.orchestration.state import MAX_ITERATIONS, WorkflowState


def create_initial_state(
    user_prompt: str,
    context: GenerationContext,
    max_iterations: int = MAX_ITERATIONS,
    system_prompt: Optional[str] = None,
    run_id: Optional[str] = None,
    cancel_token: Optional[CancellationToken] = None,
) -> WorkflowState:
    """
    Build the starting state for one run.

    Args:
        user_prompt: The user's message for this run.
        context: History, current page and style preset.
        max_iterations: Cap on LLM calls in this run.
        system_prompt: Optional prompt that replaces the one built from context.
        run_id: Identifier used for logging.
        cancel_token: Optional cancellation token for this run.

    Returns:
        Fresh WorkflowState owned by one run.
    """
    return {
        "user_prompt": user_prompt,
        "context": context,
        "system_prompt": system_prompt,
        "generated_html": "",
        "is_valid": False,
        "iterations": 0,
        "max_iterations": max_iterations,
        "errors": [],
        "next_step": None,
        "run_id": run_id,
        "cancel_token": cancel_token,
    }


def build_result(state: WorkflowState) -> GenerationResult:
    """Convert a final workflow state into a GenerationResult."""
    return GenerationResult(
        html=state.get("generated_html") or "",
        success=bool(state.get("is_valid", False)),
        errors=list(state.get("errors") or []),
        iterations=state.get("iterations", 0),
    )


def get_state_summary(state: WorkflowState) -> str:
    """
    Get a human-readable summary of the current state.

    Args:
        state: Current WorkflowState

    Returns:
        Formatted string summary
    """
    summary = []
    summary.append(f"Iterations: {state.get('iterations', 0)}/{state.get('max_iterations', MAX_ITERATIONS)}")
    summary.append(f"HTML length: {len(state.get('generated_html') or '')}")
    summary.append(f"Valid: {state.get('is_valid', False)}")
    summary.append(f"Next step: {state.get('next_step', 'N/A')}")

    if state.get("errors"):
        summary.append(f"Errors: {len(state['errors'])}")

    return "\n".join(summary)
