"""Majority-vote sampling over repeated oracle calls."""

from __future__ import annotations

import logging
from collections import Counter
from collections.abc import Sequence
from concurrent.futures import ThreadPoolExecutor

from graph.types import Triple
from oracle.base_oracle import BaseOracle, OracleError

logger = logging.getLogger("wg.oracle.sampling")


class SamplingOracle(BaseOracle):
    """Asks the wrapped oracle ``samples`` times concurrently and keeps the most common answer.

    Failed samples are dropped. Only when every sample fails does the call
    raise ``OracleError``.
    """

    def __init__(self, oracle: BaseOracle, samples: int = 3) -> None:
        if samples < 1:
            raise ValueError("samples must be at least 1")
        self.oracle = oracle
        self.samples = samples

    def generate(self, a: str, b: str, examples: Sequence[Triple] = ()) -> str:
        answers: list[str] = []
        errors: list[OracleError] = []
        with ThreadPoolExecutor(max_workers=self.samples) as pool:
            futures = [
                pool.submit(self.oracle.generate, a, b, examples) for _ in range(self.samples)
            ]
            for future in futures:
                try:
                    answers.append(future.result())
                except OracleError as exc:
                    errors.append(exc)

        if not answers:
            logger.error("all %d samples failed for %s + %s", self.samples, a, b)
            raise OracleError(f"all {self.samples} samples failed: {errors[-1]}")
        if errors:
            logger.warning("%d of %d samples failed for %s + %s", len(errors), self.samples, a, b)

        counts = Counter(answers)
        winner, votes = counts.most_common(1)[0]
        logger.debug("samples for %s + %s: %s -> %s (%d votes)", a, b, dict(counts), winner, votes)
        return winner
