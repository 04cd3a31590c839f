"""
LLM Debug Logger for tracking LLM API calls and workflow events.

Supports configurable log levels (NONE, INFO, DEBUG, TRACE) and dual output:
- Console: Human-readable formatted output
- File: JSON Lines format for parsing and analysis, one file per workflow run
"""

import json
import os
import time
import uuid
from datetime import datetime
from enum import Enum
from pathlib import Path
from typing import Any, Dict, List, Optional

from dotenv import load_dotenv


class LogLevel(Enum):
    """Logging levels for LLM debug output."""

    NONE = 0
    INFO = 1
    DEBUG = 2
    TRACE = 3


class LLMLogger:
    """Centralized logger for LLM API calls with configurable levels."""

    _instance: Optional["LLMLogger"] = None

    def __new__(cls):
        """Singleton pattern implementation."""
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance._initialized = False
        return cls._instance

    def __init__(self):
        """Initialize the logger with configuration from environment."""
        if self._initialized:
            return

        load_dotenv()
        self.configure(
            level=os.getenv("LLM_DEBUG_LEVEL", "NONE"),
            log_to_file=os.getenv("LLM_LOG_TO_FILE", "true").lower() == "true",
            log_dir=os.getenv("LLM_LOG_DIR", "outputs"),
        )

        self._initialized = True

    def configure(self, level: str = "NONE", log_to_file: bool = True, log_dir: Any = "outputs"):
        """Reconfigure level and file output at runtime."""
        try:
            self.level = LogLevel[str(level).upper()]
        except KeyError:
            self.level = LogLevel.NONE
        self.log_to_file = log_to_file
        self.log_dir = Path(log_dir)

    def should_log(self, min_level: LogLevel) -> bool:
        """Check if we should log at the given level."""
        return self.level.value >= min_level.value

    def _format_timestamp(self) -> str:
        """Get ISO8601 formatted timestamp."""
        return datetime.now().isoformat()

    def _truncate_content(self, content: str, max_len: int = 200) -> str:
        """Truncate content for preview."""
        if len(content) <= max_len:
            return content
        return content[:max_len] + "... [truncated]"

    def _serialize_message(self, msg: Any) -> Dict[str, Any]:
        """Serialize a message object to dict."""
        if hasattr(msg, "content"):
            content = msg.content
            if not isinstance(content, str):
                content = json.dumps(content, ensure_ascii=False)
            return {"type": msg.__class__.__name__, "content": content}
        return {"type": type(msg).__name__, "content": str(msg)}

    def _format_console_debug(
        self,
        request_messages: List[Any],
        response_content: Optional[str] = None,
    ) -> str:
        """Format debug info for console."""
        lines = [f"  Messages: {len(request_messages)}"]
        for i, msg in enumerate(request_messages[:3]):
            msg_dict = self._serialize_message(msg)
            preview = self._truncate_content(msg_dict["content"], 150)
            lines.append(f"    {i+1}. [{msg_dict['type']}] {preview}")
        if len(request_messages) > 3:
            lines.append(f"    ... and {len(request_messages) - 3} more")

        if response_content:
            lines.append(f"  Response: {self._truncate_content(response_content, 200)}")

        return "\n".join(lines)

    def _format_console_trace(
        self,
        request_messages: List[Any],
        response_content: str,
        token_usage: Optional[Dict] = None,
    ) -> str:
        """Format full trace info for console."""
        lines = ["  REQUEST MESSAGES:"]
        for i, msg in enumerate(request_messages):
            msg_dict = self._serialize_message(msg)
            lines.append(f"    [{i+1}] {msg_dict['type']}:")
            content = msg_dict["content"]
            if len(content) > 500:
                lines.append(f"      {content[:500]}...")
                lines.append(f"      ... [{len(content) - 500} more chars]")
            else:
                for line in content.split("\n"):
                    lines.append(f"      {line}")

        lines.append("\n  RESPONSE:")
        if len(response_content) > 1000:
            lines.append(f"    {response_content[:1000]}...")
            lines.append(f"    ... [{len(response_content) - 1000} more chars]")
        else:
            for line in response_content.split("\n"):
                lines.append(f"    {line}")

        if token_usage:
            lines.append("\n  TOKEN USAGE:")
            for key, value in token_usage.items():
                lines.append(f"    {key}: {value}")

        return "\n".join(lines)

    def _write_to_file(self, run_id: Optional[str], log_entry: Dict[str, Any]):
        """Write log entry to JSON Lines file."""
        if not self.log_to_file or not run_id:
            return

        log_file = self.log_dir / run_id / "logs" / "llm_calls.jsonl"
        log_file.parent.mkdir(parents=True, exist_ok=True)

        with open(log_file, "a", encoding="utf-8") as f:
            f.write(json.dumps(log_entry, ensure_ascii=False, default=str) + "\n")

    def log_invocation(
        self,
        component: str,
        provider: str,
        model: str,
        run_id: Optional[str] = None,
    ) -> str:
        """
        Log the start of an LLM invocation.

        Returns:
            Invocation ID (UUID string) for tracking this call, or "" when disabled
        """
        if not self.should_log(LogLevel.INFO):
            return ""

        invocation_id = str(uuid.uuid4())
        console_msg = f"[{self._format_timestamp()}] 🔵 LLM Call: [{component}] {provider}/{model}"
        if run_id:
            console_msg += f" | run_id: {run_id}"
        print(console_msg)

        return invocation_id

    def log_request(
        self,
        invocation_id: str,
        component: str,
        provider: str,
        model: str,
        messages: List[Any],
        temperature: Optional[float] = None,
        max_tokens: Optional[int] = None,
        run_id: Optional[str] = None,
        metadata: Optional[Dict[str, Any]] = None,
    ):
        """Log LLM request details."""
        if not self.should_log(LogLevel.DEBUG):
            return

        print(self._format_console_debug(messages))

        log_entry = {
            "timestamp": self._format_timestamp(),
            "level": self.level.name,
            "component": component,
            "invocation_id": invocation_id,
            "provider": provider,
            "model": model,
            "run_id": run_id,
            "request": {
                "messages": (
                    [self._serialize_message(msg) for msg in messages]
                    if self.level == LogLevel.TRACE
                    else []
                ),
                "message_count": len(messages),
                "temperature": temperature,
                "max_tokens": max_tokens,
            },
            "metadata": metadata or {},
        }
        self._write_to_file(run_id, log_entry)

    def log_response(
        self,
        invocation_id: str,
        component: str,
        provider: str,
        model: str,
        request_messages: List[Any],
        response: Any,
        start_time: float,
        end_time: float,
        run_id: Optional[str] = None,
        metadata: Optional[Dict[str, Any]] = None,
    ):
        """Log LLM response with timing and token usage."""
        if not self.should_log(LogLevel.INFO):
            return

        timestamp = self._format_timestamp()
        latency_ms = (end_time - start_time) * 1000

        content = getattr(response, "content", response)
        if not isinstance(content, str):
            content = json.dumps(content, ensure_ascii=False, default=str)

        token_usage = {}
        usage_metadata = getattr(response, "usage_metadata", None)
        if usage_metadata:
            token_usage = {
                "prompt_tokens": usage_metadata.get("input_tokens"),
                "completion_tokens": usage_metadata.get("output_tokens"),
                "total_tokens": usage_metadata.get("total_tokens"),
            }
        total_tokens = token_usage.get("total_tokens")

        parts = [f"[{component}]", f"{provider}/{model}", f"{latency_ms:.1f}ms"]
        if total_tokens is not None:
            parts.append(f"{total_tokens} tokens")
        print(f"[{timestamp}] ✅ LLM Response: " + " | ".join(parts))

        if self.should_log(LogLevel.DEBUG):
            print(self._format_console_debug(request_messages, content))

        if self.should_log(LogLevel.TRACE):
            print(self._format_console_trace(request_messages, content, token_usage))

        log_entry = {
            "timestamp": timestamp,
            "level": self.level.name,
            "component": component,
            "invocation_id": invocation_id,
            "provider": provider,
            "model": model,
            "run_id": run_id,
            "request": {
                "messages": (
                    [self._serialize_message(msg) for msg in request_messages]
                    if self.level == LogLevel.TRACE
                    else []
                ),
                "message_count": len(request_messages),
            },
            "response": {
                "content": content if self.level == LogLevel.TRACE else None,
                "content_preview": (
                    self._truncate_content(content, 200)
                    if self.should_log(LogLevel.DEBUG)
                    else None
                ),
                "content_length": len(content),
            },
            "timing": {
                "latency_ms": latency_ms,
                "start_time": datetime.fromtimestamp(start_time).isoformat(),
                "end_time": datetime.fromtimestamp(end_time).isoformat(),
            },
            "usage": token_usage or None,
            "metadata": metadata or {},
        }
        self._write_to_file(run_id, log_entry)

    def log_error(self, component: str, error: BaseException, run_id: Optional[str] = None):
        """Log a failed LLM call."""
        if not self.should_log(LogLevel.INFO):
            return

        timestamp = self._format_timestamp()
        print(f"[{timestamp}] ❌ LLM Error: [{component}] {type(error).__name__}: {error}")
        self._write_to_file(run_id, {
            "timestamp": timestamp,
            "level": "ERROR",
            "component": component,
            "run_id": run_id,
            "error": {"type": type(error).__name__, "message": str(error)},
        })

    def log_event(
        self,
        component: str,
        message: str,
        run_id: Optional[str] = None,
        level: LogLevel = LogLevel.INFO,
        **details: Any,
    ):
        """Log a workflow event such as a retry, exhaustion or cancellation."""
        if not self.should_log(level):
            return

        timestamp = self._format_timestamp()
        console_msg = f"[{timestamp}] 🔶 [{component}] {message}"
        if run_id:
            console_msg += f" | run_id: {run_id}"
        print(console_msg)
        self._write_to_file(run_id, {
            "timestamp": timestamp,
            "level": level.name,
            "component": component,
            "run_id": run_id,
            "event": message,
            "details": details,
        })


def get_logger() -> LLMLogger:
    """Get the singleton logger instance."""
    return LLMLogger()


class LoggedLLM:
    """
    Wrapper around LangChain chat models to add debug logging.

    Intercepts invoke() calls and logs requests, responses, timing, and metadata.
    """

    def __init__(
        self,
        llm_instance: Any,
        component: str,
        provider: str,
        model: str,
        run_id: Optional[str] = None,
        metadata: Optional[Dict[str, Any]] = None,
    ):
        """
        Initialize LoggedLLM wrapper.

        Args:
            llm_instance: The chat model (ChatOpenAI, ChatAnthropic or a fake)
            component: Component name (e.g., "generator", "validator")
            provider: Provider name ("openrouter", "openai" or "anthropic")
            model: Model name
            run_id: Optional workflow run ID for tracking
            metadata: Optional additional metadata to include in logs
        """
        self.llm = llm_instance
        self.component = component
        self.provider = provider
        self.model = model
        self.run_id = run_id
        self.metadata = metadata or {}
        self.logger = get_logger()

    def __getattr__(self, name: str):
        """Delegate all other attributes to wrapped LLM instance."""
        return getattr(self.llm, name)

    def invoke(self, messages: List[Any], **kwargs) -> Any:
        """
        Invoke the chat model with logging.

        Args:
            messages: List of message objects
            **kwargs: Additional arguments passed to the chat model

        Returns:
            Chat model response
        """
        invocation_id = self.logger.log_invocation(
            component=self.component,
            provider=self.provider,
            model=self.model,
            run_id=self.run_id,
        )

        if not invocation_id:
            return self.llm.invoke(messages, **kwargs)

        start_time = time.time()
        self.logger.log_request(
            invocation_id=invocation_id,
            component=self.component,
            provider=self.provider,
            model=self.model,
            messages=messages,
            temperature=getattr(self.llm, "temperature", None),
            max_tokens=getattr(self.llm, "max_tokens", None),
            run_id=self.run_id,
            metadata=self.metadata,
        )

        try:
            response = self.llm.invoke(messages, **kwargs)
        except Exception as e:
            self.logger.log_error(self.component, e, run_id=self.run_id)
            raise

        self.logger.log_response(
            invocation_id=invocation_id,
            component=self.component,
            provider=self.provider,
            model=self.model,
            request_messages=messages,
            response=response,
            start_time=start_time,
            end_time=time.time(),
            run_id=self.run_id,
            metadata=self.metadata,
        )

        return response
