"""
Client for the external text-generation endpoint.

Wraps a LangChain chat model. The default provider is OpenRouter through its
OpenAI-compatible chat completions API; OpenAI and Anthropic are also
supported. Failures are raised as typed errors and never replaced with
fallback content here.
"""

from typing import Any, List, Optional

from langchain_anthropic import ChatAnthropic
from langchain_core.messages import BaseMessage
from langchain_openai import ChatOpenAI

from landingwise.config import API_KEY_VARS, Settings
from landingwise.errors import GenerationTransportError, MalformedResponseError
from landingwise.utils.llm_logger import LoggedLLM

# Raised by the SDKs and LangChain when a 2xx response cannot be read as a
# chat completion (missing choices, null content, schema mismatch, bad JSON).
# UnicodeError is a ValueError raised while decoding the body; it is a
# transport fault and is caught before this tuple.
MALFORMED_RESPONSE_ERRORS = (KeyError, IndexError, TypeError, ValueError)


def create_chat_model(settings: Settings):
    """
    Build the LangChain chat model for the configured provider.

    Args:
        settings: Provider, model, sampling and credential settings.

    Returns:
        ChatOpenAI or ChatAnthropic instance.

    Raises:
        ValueError: If the API key is missing or the provider is unsupported.
    """
    provider = settings.provider.lower()
    if provider not in API_KEY_VARS:
        raise ValueError(f"Unsupported provider: {provider}")
    if not settings.api_key:
        raise ValueError(f"{API_KEY_VARS[provider]} environment variable not set")

    if provider == "openrouter":
        return ChatOpenAI(
            model=settings.model,
            temperature=settings.temperature,
            max_tokens=settings.max_tokens,
            api_key=settings.api_key,
            base_url=settings.base_url,
            timeout=settings.request_timeout,
            default_headers={
                "HTTP-Referer": settings.app_url,
                "X-Title": settings.app_title,
            },
        )
    elif provider == "openai":
        return ChatOpenAI(
            model=settings.model,
            temperature=settings.temperature,
            max_tokens=settings.max_tokens,
            api_key=settings.api_key,
            timeout=settings.request_timeout,
        )
    else:
        return ChatAnthropic(
            model=settings.model,
            temperature=settings.temperature,
            max_tokens=settings.max_tokens,
            api_key=settings.api_key,
            timeout=settings.request_timeout,
        )


class GenerationClient:
    """Sends role-tagged messages to the chat model and returns reply text."""

    def __init__(self, llm: Any, provider: str = "openrouter", model: Optional[str] = None):
        """
        Initialize the client.

        Args:
            llm: Chat model exposing invoke(messages, **kwargs) -> message.
            provider: Provider name, used for logging.
            model: Model name, used for logging.
        """
        self.llm = llm
        self.provider = provider
        self.model = model or getattr(llm, "model_name", None) or getattr(llm, "model", None) or "unknown"

    @classmethod
    def from_settings(cls, settings: Optional[Settings] = None) -> "GenerationClient":
        """Create a client from settings (read from the environment if omitted)."""
        settings = settings or Settings.from_env()
        return cls(
            create_chat_model(settings),
            provider=settings.provider,
            model=settings.model,
        )

    @staticmethod
    def extract_text(response: Any) -> str:
        """
        Extract reply text from a chat model response.

        Args:
            response: Message returned by the chat model.

        Returns:
            The text content. Content block lists are joined from their text parts.

        Raises:
            MalformedResponseError: If the response carries no readable text.
        """
        content = getattr(response, "content", None)
        if isinstance(content, str):
            return content

        if isinstance(content, list):
            parts = []
            for block in content:
                if isinstance(block, str):
                    parts.append(block)
                elif isinstance(block, dict) and block.get("type") == "text":
                    parts.append(block.get("text") or "")
            if parts or not content:
                return "".join(parts)

        raise MalformedResponseError(
            f"Unexpected response content: {type(content).__name__}"
        )

    def invoke(
        self,
        messages: List[BaseMessage],
        component: str = "generator",
        run_id: Optional[str] = None,
        timeout: Optional[float] = None,
    ) -> str:
        """
        Send messages and return the text of the first choice.

        Args:
            messages: Ordered system/human messages.
            component: Component name for logging.
            run_id: Workflow run ID for logging.
            timeout: Per-call timeout in seconds, overriding the client default.

        Returns:
            Reply text.

        Raises:
            GenerationTransportError: Connection, timeout or non-2xx failure.
            MalformedResponseError: Reply could not be read as a chat completion.
        """
        llm = LoggedLLM(
            llm_instance=self.llm,
            component=component,
            provider=self.provider,
            model=self.model,
            run_id=run_id,
        )
        kwargs = {}
        if timeout is not None:
            kwargs["timeout"] = timeout

        try:
            response = llm.invoke(messages, **kwargs)
        except UnicodeError as e:
            raise GenerationTransportError(f"{type(e).__name__}: {e}") from e
        except MALFORMED_RESPONSE_ERRORS as e:
            raise MalformedResponseError(f"Unexpected response payload: {e}") from e
        except Exception as e:
            raise GenerationTransportError(f"{type(e).__name__}: {e}") from e

        return self.extract_text(response)
