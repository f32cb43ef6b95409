"""Ollama oracle over the server's OpenAI-compatible completions endpoint."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from openai import OpenAI, OpenAIError

from graph.types import Triple
from oracle.base_oracle import BaseOracle, OracleError
from oracle.prompt import STOP_SEQUENCES, parse_completion, render_prompt

logger = logging.getLogger("wg.oracle.ollama")


class OllamaOracle(BaseOracle):
    """Raw-completion adapter for a local Ollama server.

    The prompt is sent untemplated so base models continue the transcript
    directly; generation stops at the end of the answer line.
    """

    def __init__(
        self,
        model: str = "neural-chat",
        base_url: str = "http://localhost:11434/v1",
        temperature: float = 0.4,
        timeout_seconds: float = 10.0,
        max_tokens: int = 16,
    ) -> None:
        self.model = model
        self.base_url = base_url
        self.temperature = temperature
        self.max_tokens = max_tokens
        # Ollama ignores the key but the client requires one.
        self.client = OpenAI(
            api_key="ollama",
            base_url=base_url,
            timeout=timeout_seconds,
            max_retries=0,
        )

    def generate(self, a: str, b: str, examples: Sequence[Triple] = ()) -> str:
        prompt = render_prompt(a, b, examples)
        try:
            response = self.client.completions.create(
                model=self.model,
                prompt=prompt,
                temperature=self.temperature,
                max_tokens=self.max_tokens,
                stop=STOP_SEQUENCES,
            )
        except OpenAIError as exc:
            logger.error("ollama %s at %s failed: %s", self.model, self.base_url, exc)
            raise OracleError(f"ollama call failed: {exc}") from exc
        if not response.choices:
            raise OracleError("ollama returned no choices")
        try:
            return parse_completion(response.choices[0].text)
        except ValueError as exc:
            raise OracleError(f"ollama returned an unusable reply: {exc}") from exc
