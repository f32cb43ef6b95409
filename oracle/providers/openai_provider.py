"""OpenAI chat-completions oracle."""

from __future__ import annotations

import logging
import os
from collections.abc import Sequence

from openai import OpenAI, OpenAIError

from graph.types import Triple
from oracle.base_oracle import BaseOracle, OracleError
from oracle.prompt import STOP_SEQUENCES, SYSTEM_INSTRUCTION, parse_completion, render_prompt

logger = logging.getLogger("wg.oracle.openai")


class OpenAIOracle(BaseOracle):
    """OpenAI API adapter. Needs ``OPENAI_API_KEY`` in the environment."""

    API_KEY_ENV = "OPENAI_API_KEY"
    BASE_URL: str | None = None

    def __init__(
        self,
        model: str = "gpt-4o-mini",
        temperature: float = 0.4,
        timeout_seconds: float = 10.0,
        base_url: str | None = None,
    ) -> None:
        self.model = model
        self.temperature = temperature
        self.timeout_seconds = timeout_seconds
        self.base_url = base_url or self.BASE_URL
        self._client: OpenAI | None = None

    def _get_client(self) -> OpenAI:
        if self._client is None:
            api_key = os.getenv(self.API_KEY_ENV)
            if not api_key:
                raise OracleError(f"{self.API_KEY_ENV} not set")
            self._client = OpenAI(
                api_key=api_key,
                base_url=self.base_url,
                timeout=self.timeout_seconds,
                max_retries=0,
            )
        return self._client

    def generate(self, a: str, b: str, examples: Sequence[Triple] = ()) -> str:
        client = self._get_client()
        messages = [
            {"role": "system", "content": SYSTEM_INSTRUCTION},
            {"role": "user", "content": render_prompt(a, b, examples)},
        ]
        try:
            response = client.chat.completions.create(
                model=self.model,
                messages=messages,
                temperature=self.temperature,
                stop=STOP_SEQUENCES,
            )
        except OpenAIError as exc:
            logger.error("%s call failed for %s + %s: %s", self.model, a, b, exc)
            raise OracleError(f"{self.model} call failed: {exc}") from exc
        if not response.choices:
            raise OracleError(f"{self.model} returned no choices")
        try:
            return parse_completion(response.choices[0].message.content)
        except ValueError as exc:
            raise OracleError(f"{self.model} returned an unusable reply: {exc}") from exc


class GroqOracle(OpenAIOracle):
    """Groq inference adapter. Uses the OpenAI-compatible endpoint."""

    API_KEY_ENV = "GROQ_API_KEY"
    BASE_URL = "https://api.groq.com/openai/v1"
