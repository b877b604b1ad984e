"""Named pipeline steps with tagged success/failure outcomes."""

import logging
import time
from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from typing import Generic, TypeVar

from citysearch.errors import ProviderError

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass(frozen=True)
class StepOutcome(Generic[T]):
    """Result of one provider call: either a value or a ProviderError."""

    step: str
    value: T | None = None
    error: ProviderError | None = None
    duration_seconds: float = 0.0

    @property
    def ok(self) -> bool:
        return self.error is None


async def run_step(step: str, call: Callable[[], Awaitable[T]]) -> StepOutcome[T]:
    """Await ``call`` and capture any failure as a ProviderError.

    Cancellation is not captured.
    """
    t0 = time.monotonic()
    try:
        value = await call()
    except Exception as e:
        duration = time.monotonic() - t0
        logger.warning(f"Error in {step} step after {duration:.2f}s: {e!r}")
        return StepOutcome(step=step, error=ProviderError(step, e), duration_seconds=duration)
    return StepOutcome(step=step, value=value, duration_seconds=time.monotonic() - t0)
