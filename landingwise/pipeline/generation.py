"""
Landing page generation pipeline.

LandingPageGenerator is the entry point used by the project layer: it owns
a generation client and a compiled workflow, and exposes generation,
conversational refinement and style adjustment with one result shape.
"""

from typing import Any, List, Optional

from landingwise.config import Settings
from landingwise.models import (
    ChatMessage,
    GenerationContext,
    GenerationResult,
    StylePreset,
)
from landingwise.orchestration.cancellation import CancellationToken
from landingwise.orchestration.graph import LandingPageWorkflow
from landingwise.orchestration.state import MAX_ITERATIONS
from landingwise.pipeline.client import GenerationClient
from landingwise.pipeline.prompts import build_style_adjustment_prompt


class LandingPageGenerator:
    """Generates and refines landing pages through the validation workflow."""

    def __init__(
        self,
        client: Optional[Any] = None,
        settings: Optional[Settings] = None,
        max_iterations: int = MAX_ITERATIONS,
        fallback_on_transport_error: bool = False,
    ):
        """
        Initialize the generator.

        Args:
            client: Generation client. Built from settings when omitted.
            settings: Settings used to build the client (read from env if omitted).
            max_iterations: Cap on LLM calls per run.
            fallback_on_transport_error: Substitute the fallback page when the
                endpoint cannot be reached on the first call.
        """
        self.client = client if client is not None else GenerationClient.from_settings(settings)
        self.workflow = LandingPageWorkflow(
            self.client,
            max_iterations=max_iterations,
            fallback_on_transport_error=fallback_on_transport_error,
        )

    def generate_landing_page(
        self,
        user_prompt: str,
        context: Optional[GenerationContext] = None,
        cancel_token: Optional[CancellationToken] = None,
    ) -> GenerationResult:
        """
        Generate a landing page from a prompt.

        Args:
            user_prompt: Description of the desired page or requested change.
            context: History, current page and style preset.
            cancel_token: Optional cancellation token / deadline.

        Returns:
            GenerationResult.
        """
        return self.workflow.run(user_prompt, context=context, cancel_token=cancel_token)

    def refine_content(
        self,
        current_html: str,
        user_feedback: str,
        conversation_history: Optional[List[ChatMessage]] = None,
        style: StylePreset = StylePreset.MODERN,
        cancel_token: Optional[CancellationToken] = None,
    ) -> GenerationResult:
        """
        Apply user feedback to an existing page.

        The original HTML is returned when the run produced no content.
        """
        context = GenerationContext(
            user_prompt=user_feedback,
            previous_messages=conversation_history or [],
            current_content=current_html,
            style=style,
        )
        result = self.workflow.run(user_feedback, context=context, cancel_token=cancel_token)
        return self._keep_original_when_empty(result, current_html)

    def adjust_style(
        self,
        current_html: str,
        style_request: str,
        target_style: StylePreset = StylePreset.MODERN,
        cancel_token: Optional[CancellationToken] = None,
    ) -> GenerationResult:
        """
        Restyle an existing page towards a preset.

        The original HTML is returned when the run produced no content.
        """
        context = GenerationContext(
            user_prompt=style_request,
            current_content=current_html,
            style=target_style,
        )
        result = self.workflow.run(
            style_request,
            context=context,
            system_prompt=build_style_adjustment_prompt(current_html, style_request, target_style),
            cancel_token=cancel_token,
        )
        return self._keep_original_when_empty(result, current_html)

    @staticmethod
    def _keep_original_when_empty(result: GenerationResult, current_html: str) -> GenerationResult:
        if result.html:
            return result
        return GenerationResult(
            html=current_html,
            success=result.success,
            errors=list(result.errors),
            iterations=result.iterations,
        )
