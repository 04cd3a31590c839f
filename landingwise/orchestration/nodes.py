"""
Node functions for the generation workflow.

Each node takes the current state, performs one step (an LLM call, a
validation pass or both) and returns a partial state update. Step failures
are recorded in the errors channel instead of being raised.
"""

from typing import Any, Dict, Optional

from langchain_core.messages import HumanMessage, SystemMessage

from landingwise.errors import (
    GenerationError,
    GenerationTransportError,
    WorkflowCancelledError,
)
from landingwise.evaluation.content_validator import validate_content
from landingwise.orchestration.state import MAX_ITERATIONS, WorkflowState
from landingwise.pipeline.parsing import ResponseParser
from landingwise.pipeline.prompts import (
    FALLBACK_HTML,
    build_corrective_prompt,
    build_generation_prompt,
)
from landingwise.utils.llm_logger import get_logger

VALIDATE = "VALIDATE"
FINISH = "FINISH"

EXHAUSTED_MESSAGE = "Validation failed after maximum iterations"


class WorkflowNodes:
    """Generate and validate steps bound to one generation client."""

    def __init__(self, client: Any, fallback_on_transport_error: bool = False):
        """
        Args:
            client: Object with invoke(messages, component=, run_id=, timeout=) -> str.
            fallback_on_transport_error: Use the built-in fallback page when the
                initial generation call cannot reach the endpoint.
        """
        self.client = client
        self.fallback_on_transport_error = fallback_on_transport_error
        self.parser = ResponseParser()
        self.logger = get_logger()

    @staticmethod
    def _call_timeout(state: WorkflowState) -> Optional[float]:
        token = state.get("cancel_token")
        return token.remaining() if token is not None else None

    @staticmethod
    def _raise_if_cancelled(state: WorkflowState):
        token = state.get("cancel_token")
        if token is not None:
            token.raise_if_cancelled()

    def _cancelled_update(
        self, state: WorkflowState, component: str, cancellation: WorkflowCancelledError
    ) -> Dict[str, Any]:
        error = f"Workflow cancelled: {cancellation}"
        self.logger.log_event(component, error, run_id=state.get("run_id"))
        return {"is_valid": False, "errors": [error], "next_step": FINISH}

    def generate_node(self, state: WorkflowState) -> Dict[str, Any]:
        """Generate the first draft from the user prompt and context."""
        run_id = state.get("run_id")
        system_prompt = state.get("system_prompt") or build_generation_prompt(state["context"])
        messages = [
            SystemMessage(content=system_prompt),
            HumanMessage(content=state["user_prompt"]),
        ]
        iterations = state.get("iterations", 0) + 1

        try:
            self._raise_if_cancelled(state)
            reply = self.client.invoke(
                messages,
                component="generator",
                run_id=run_id,
                timeout=self._call_timeout(state),
            )
        except WorkflowCancelledError as e:
            return self._cancelled_update(state, "generator", e)
        except GenerationError as e:
            error = f"Generation error: {e}"
            self.logger.log_event("generator", error, run_id=run_id, iteration=iterations)
            updates = {
                "errors": [error],
                "iterations": iterations,
                "next_step": VALIDATE,
            }
            if self.fallback_on_transport_error and isinstance(e, GenerationTransportError):
                updates["generated_html"] = FALLBACK_HTML
            return updates

        return {
            "generated_html": self.parser.extract_html(reply),
            "iterations": iterations,
            "next_step": VALIDATE,
        }

    def validate_node(self, state: WorkflowState) -> Dict[str, Any]:
        """Check the current draft; request a corrected draft while budget remains."""
        run_id = state.get("run_id")
        html = state.get("generated_html") or ""
        verdict = validate_content(html)

        if verdict.is_basic_valid:
            return {"is_valid": True, "next_step": FINISH}

        iterations = state.get("iterations", 0)
        if iterations >= state.get("max_iterations", MAX_ITERATIONS):
            self.logger.log_event("validator", EXHAUSTED_MESSAGE, run_id=run_id, iterations=iterations)
            return {"is_valid": False, "errors": [EXHAUSTED_MESSAGE], "next_step": FINISH}

        issues = verdict.missing_issues()
        self.logger.log_event(
            "validator",
            f"Requesting correction ({len(issues)} issues)",
            run_id=run_id,
            iteration=iterations + 1,
            issues=issues,
        )
        messages = [SystemMessage(content=build_corrective_prompt(html, verdict))]

        try:
            self._raise_if_cancelled(state)
            reply = self.client.invoke(
                messages,
                component="validator",
                run_id=run_id,
                timeout=self._call_timeout(state),
            )
        except WorkflowCancelledError as e:
            return self._cancelled_update(state, "validator", e)
        except GenerationError as e:
            error = f"Validation error: {e}"
            self.logger.log_event("validator", error, run_id=run_id, iteration=iterations + 1)
            return {
                "is_valid": False,
                "errors": [error],
                "iterations": iterations + 1,
                "next_step": VALIDATE,
            }

        return {
            "generated_html": self.parser.extract_html(reply),
            "is_valid": False,
            "iterations": iterations + 1,
            "next_step": VALIDATE,
        }
