"""
LangGraph construction for the landing page generation workflow.

Builds the state graph with the generate and validate nodes, the
conditional routing between them, and a runner that turns a user prompt
into a GenerationResult.
"""

import uuid
from typing import Any, Literal, Optional

from langgraph.graph import END, StateGraph

from landingwise.models import GenerationContext, GenerationResult
from landingwise.orchestration.cancellation import CancellationToken
from landingwise.orchestration.nodes import FINISH, VALIDATE, WorkflowNodes
from landingwise.orchestration.state import MAX_ITERATIONS, WorkflowState
from landingwise.orchestration.utils import (
    build_result,
    create_initial_state,
    get_state_summary,
)
from landingwise.utils.llm_logger import get_logger


def route_after_generate(state: WorkflowState) -> Literal["validate", END]:
    """Validate the draft unless the run was cancelled before generating."""
    if state.get("next_step") == FINISH:
        return END
    return "validate"


def route_after_validate(state: WorkflowState) -> Literal["validate", END]:
    """Re-validate a corrected draft, or stop."""
    if state.get("next_step") == VALIDATE:
        return "validate"
    return END


def create_landing_page_graph(nodes: WorkflowNodes, checkpointer=None):
    """
    Create and compile the generation LangGraph.

    Args:
        nodes: Node implementations bound to a generation client
        checkpointer: Optional checkpointer for state persistence

    Returns:
        Compiled LangGraph application
    """
    graph = StateGraph(WorkflowState)

    graph.add_node("generate", nodes.generate_node)
    graph.add_node("validate", nodes.validate_node)

    graph.set_entry_point("generate")

    graph.add_conditional_edges(
        "generate",
        route_after_generate,
        {"validate": "validate", END: END},
    )
    # Validation loops on itself while it keeps requesting corrections
    graph.add_conditional_edges(
        "validate",
        route_after_validate,
        {"validate": "validate", END: END},
    )

    if checkpointer:
        return graph.compile(checkpointer=checkpointer)
    return graph.compile()


class LandingPageWorkflow:
    """Runs the generate/validate state machine for one request at a time."""

    def __init__(
        self,
        client: Any,
        max_iterations: int = MAX_ITERATIONS,
        fallback_on_transport_error: bool = False,
    ):
        """
        Args:
            client: Generation client (or a fake with the same invoke signature).
            max_iterations: Cap on LLM calls per run; at least 1.
            fallback_on_transport_error: Substitute the fallback page when the
                first generation call fails to reach the endpoint.
        """
        if max_iterations < 1:
            raise ValueError("max_iterations must be at least 1")

        self.max_iterations = max_iterations
        self.nodes = WorkflowNodes(client, fallback_on_transport_error=fallback_on_transport_error)
        self.app = create_landing_page_graph(self.nodes)
        self.logger = get_logger()

    @property
    def recursion_limit(self) -> int:
        # One generate step plus at most max_iterations validate steps
        return self.max_iterations * 2 + 5

    def run(
        self,
        user_prompt: str,
        context: Optional[GenerationContext] = None,
        system_prompt: Optional[str] = None,
        cancel_token: Optional[CancellationToken] = None,
    ) -> GenerationResult:
        """
        Execute one workflow run.

        Args:
            user_prompt: The user's message.
            context: Generation context; built from user_prompt when omitted.
            system_prompt: Optional system prompt replacing the generated one.
            cancel_token: Optional cancellation token / deadline.

        Returns:
            GenerationResult. Never raises; failures are reported in errors.
        """
        run_id = uuid.uuid4().hex[:12]
        context = context or GenerationContext(user_prompt=user_prompt)
        state = create_initial_state(
            user_prompt,
            context,
            max_iterations=self.max_iterations,
            system_prompt=system_prompt,
            run_id=run_id,
            cancel_token=cancel_token,
        )

        try:
            final_state = self.app.invoke(state, config={"recursion_limit": self.recursion_limit})
        except Exception as e:
            error = f"Workflow error: {e}"
            self.logger.log_event("workflow", error, run_id=run_id)
            return GenerationResult(html="", success=False, errors=[error], iterations=0)

        self.logger.log_event("workflow", "Run finished", run_id=run_id, summary=get_state_summary(final_state))
        return build_result(final_state)
