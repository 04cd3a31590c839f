"""
Runtime configuration read from the environment (and a local .env file).
"""

import os
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from pydantic import BaseModel

OPENROUTER_BASE_URL = "https://openrouter.ai/api/v1"

DEFAULT_MODELS = {
    "openrouter": "meta-llama/llama-3.1-8b-instruct:free",
    "openai": "gpt-4o-mini",
    "anthropic": "claude-3-5-haiku-latest",
}

API_KEY_VARS = {
    "openrouter": "OPENROUTER_API_KEY",
    "openai": "OPENAI_API_KEY",
    "anthropic": "ANTHROPIC_API_KEY",
}


class Settings(BaseModel):
    """Settings for the generation client and the project store."""
    provider: str = "openrouter"
    model: str = DEFAULT_MODELS["openrouter"]
    temperature: float = 0.7
    max_tokens: int = 4000
    request_timeout: float = 120.0
    api_key: Optional[str] = None
    base_url: str = OPENROUTER_BASE_URL
    app_url: str = "http://localhost:3000"
    app_title: str = "LandingWise"
    data_dir: Path = Path("outputs/projects")

    @classmethod
    def from_env(cls) -> "Settings":
        """
        Build settings from environment variables.

        Returns:
            Settings populated from LLM_*, provider key and app variables.

        Raises:
            ValueError: If LLM_PROVIDER names an unsupported provider.
        """
        load_dotenv()

        provider = os.getenv("LLM_PROVIDER", "openrouter").lower()
        if provider not in DEFAULT_MODELS:
            raise ValueError(f"Unsupported provider: {provider}")

        return cls(
            provider=provider,
            model=os.getenv("LLM_MODEL") or DEFAULT_MODELS[provider],
            temperature=float(os.getenv("LLM_TEMPERATURE", "0.7")),
            max_tokens=int(os.getenv("LLM_MAX_TOKENS", "4000")),
            request_timeout=float(os.getenv("LLM_REQUEST_TIMEOUT", "120")),
            api_key=os.getenv(API_KEY_VARS[provider]),
            base_url=os.getenv("OPENROUTER_BASE_URL", OPENROUTER_BASE_URL),
            app_url=os.getenv("APP_URL", "http://localhost:3000"),
            app_title=os.getenv("APP_TITLE", "LandingWise"),
            data_dir=Path(os.getenv("LANDINGWISE_DATA_DIR", "outputs/projects")),
        )
