"""Oracle provider factory."""

from __future__ import annotations

from typing import Any

from oracle.base_oracle import BaseOracle
from oracle.local.ollama_provider import OllamaOracle
from oracle.providers.mock_provider import MockOracle
from oracle.providers.openai_provider import GroqOracle, OpenAIOracle
from oracle.sampling import SamplingOracle


def _build_provider(config: dict[str, Any]) -> BaseOracle:
    oracle_cfg = config.get("oracle", {})
    active = oracle_cfg.get("active_provider", "mock")
    providers = oracle_cfg.get("providers", {})
    active_cfg = providers.get(active, {})
    provider_type = active_cfg.get("type", active)
    temperature = float(active_cfg.get("temperature", 0.4))
    timeout = float(active_cfg.get("timeout_seconds", 10.0))

    if provider_type == "ollama":
        return OllamaOracle(
            model=active_cfg.get("model", "neural-chat"),
            base_url=active_cfg.get("base_url", "http://localhost:11434/v1"),
            temperature=temperature,
            timeout_seconds=timeout,
        )
    if provider_type == "openai":
        return OpenAIOracle(
            model=active_cfg.get("model", "gpt-4o-mini"),
            temperature=temperature,
            timeout_seconds=timeout,
            base_url=active_cfg.get("base_url"),
        )
    if provider_type == "groq":
        return GroqOracle(
            model=active_cfg.get("model", "llama-3.3-70b-versatile"),
            temperature=temperature,
            timeout_seconds=timeout,
        )
    if provider_type == "mock":
        return MockOracle()
    raise ValueError(f"Unknown oracle provider type: {provider_type}")


def build_oracle(config: dict[str, Any]) -> BaseOracle:
    """Build the configured oracle, wrapped for sampling when requested."""
    oracle_cfg = config.get("oracle", {})
    provider = _build_provider(config)
    strategy = oracle_cfg.get("strategy", "simple")
    if strategy == "simple":
        return provider
    if strategy == "sample":
        return SamplingOracle(provider, samples=int(oracle_cfg.get("samples", 3)))
    raise ValueError(f"Unknown oracle strategy: {strategy}")
