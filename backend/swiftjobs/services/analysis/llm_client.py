import logging
import os
from typing import Optional
from pydantic import BaseModel

import anthropic
import openai

logger = logging.getLogger(__name__)

GROQ_BASE_URL = "https://api.groq.com/openai/v1"

SYSTEM_PROMPT = (
    "You are an expert HR and talent matching AI. Analyze candidates and jobs "
    "to provide accurate matching scores (0-100%) and detailed explanations."
)

PROVIDER_KEY_ENV = {
    "groq": "GROQ_API_KEY",
    "openai": "OPENAI_API_KEY",
    "anthropic": "ANTHROPIC_API_KEY",
}


class LLMError(Exception):
    """Raised when the completion API call fails."""
    pass


class LLMSettings(BaseModel):
    provider: str = "groq"
    model: str = "llama-3.3-70b-versatile"
    temperature: float = 0.5
    max_tokens: int = 1500
    api_key: Optional[str] = None


class LLMClient:
    """Thin async wrapper over the completion APIs of supported providers."""

    def __init__(self, settings: LLMSettings):
        self.settings = settings
        self.provider = settings.provider.lower()
        self.model = settings.model

        if self.provider not in PROVIDER_KEY_ENV:
            raise ValueError(f"Unsupported LLM provider: {self.provider}")

        self.api_key = settings.api_key or os.getenv(PROVIDER_KEY_ENV[self.provider])
        self._client = None

    @property
    def client(self):
        """Get or create the provider SDK client."""
        if self._client is None:
            if not self.api_key:
                # Each provider only ever uses its own key
                raise ValueError(f"No API key configured for LLM provider: {self.provider}")
            if self.provider == "groq":
                # Groq serves an OpenAI-compatible chat completions endpoint
                self._client = openai.AsyncOpenAI(api_key=self.api_key, base_url=GROQ_BASE_URL)
            elif self.provider == "openai":
                self._client = openai.AsyncOpenAI(api_key=self.api_key)
            else:
                self._client = anthropic.AsyncAnthropic(api_key=self.api_key)
        return self._client

    async def complete(self, prompt: str, system_prompt: str = SYSTEM_PROMPT) -> str:
        """
        Send a single prompt and return the raw text of the reply.

        Raises:
            LLMError: If the provider call fails for any reason
        """
        try:
            if self.provider == "anthropic":
                content = await self._call_anthropic(prompt, system_prompt)
            else:
                content = await self._call_openai(prompt, system_prompt)
        except Exception as e:
            logger.error(
                f"LLM call failed: {str(e)}",
                exc_info=True,
                extra={"provider": self.provider, "model": self.model}
            )
            raise LLMError("AI analysis failed") from e

        return content or ""

    async def _call_openai(self, prompt: str, system_prompt: str) -> Optional[str]:
        """Call an OpenAI-compatible chat completions API."""
        response = await self.client.chat.completions.create(
            model=self.model,
            messages=[
                {"role": "system", "content": system_prompt},
                {"role": "user", "content": prompt}
            ],
            temperature=self.settings.temperature,
            max_tokens=self.settings.max_tokens,
        )

        if not response.choices:
            return None

        tokens_used = response.usage.total_tokens if response.usage else None
        logger.debug(
            "LLM completion received",
            extra={"provider": self.provider, "tokens_used": tokens_used}
        )

        return response.choices[0].message.content

    async def _call_anthropic(self, prompt: str, system_prompt: str) -> Optional[str]:
        """Call Anthropic API."""
        response = await self.client.messages.create(
            model=self.model,
            max_tokens=self.settings.max_tokens,
            temperature=self.settings.temperature,
            system=system_prompt,
            messages=[
                {"role": "user", "content": prompt}
            ]
        )

        if not response.content:
            return None

        return response.content[0].text
