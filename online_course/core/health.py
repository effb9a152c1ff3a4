# ==============================================================================
# HEALTH CHECKS - Process and Dependency Probes
# ==============================================================================
# Health checks are registered once at startup and run on every /health call
# ==============================================================================

from __future__ import annotations

import logging
import time
from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Dict, Optional, Sequence, Tuple

import psutil

logger = logging.getLogger(__name__)


class HealthStatus(str, Enum):
    HEALTHY = "Healthy"
    DEGRADED = "Degraded"
    UNHEALTHY = "Unhealthy"


@dataclass(frozen=True)
class HealthCheckResult:
    """Outcome of a single health check."""

    status: HealthStatus
    description: Optional[str] = None
    exception: Optional[str] = None
    duration: float = 0.0

    def to_dict(self) -> Dict[str, Any]:
        return {
            "status": self.status.value,
            "description": self.description,
            "exception": self.exception,
            "duration": f"{self.duration * 1000:.2f}ms",
        }


@dataclass(frozen=True)
class HealthReport:
    """Aggregate of all registered checks."""

    status: HealthStatus
    entries: Dict[str, HealthCheckResult]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "status": self.status.value,
            "results": {
                name: result.to_dict() for name, result in self.entries.items()
            },
        }


class HealthCheck(ABC):
    """A named probe returning a HealthCheckResult."""

    @abstractmethod
    async def check(self) -> HealthCheckResult:
        pass


class PrivateMemoryHealthCheck(HealthCheck):
    """
    Reports unhealthy when the process resident memory passes a threshold.

    Args:
        max_memory_bytes: Threshold in bytes
    """

    def __init__(self, max_memory_bytes: int) -> None:
        self._max_memory_bytes = max_memory_bytes

    async def check(self) -> HealthCheckResult:
        memory_usage = psutil.Process().memory_info().rss
        usage_mb = memory_usage // 1024 // 1024

        if memory_usage < self._max_memory_bytes:
            return HealthCheckResult(
                status=HealthStatus.HEALTHY,
                description=f"Memory usage is under control: {usage_mb} MB.",
            )
        return HealthCheckResult(
            status=HealthStatus.UNHEALTHY,
            description=f"Memory usage is too high: {usage_mb} MB.",
        )


class DatabaseHealthCheck(HealthCheck):
    """
    Pings the persistence gateway.

    Args:
        probe: Coroutine function returning True when the store answers
    """

    def __init__(self, probe: Callable[[], Any]) -> None:
        self._probe = probe

    async def check(self) -> HealthCheckResult:
        if await self._probe():
            return HealthCheckResult(
                status=HealthStatus.HEALTHY,
                description="Database connection is healthy.",
            )
        return HealthCheckResult(
            status=HealthStatus.UNHEALTHY,
            description="Database is not reachable.",
        )


class HealthCheckService:
    """
    Runs a fixed set of named checks.

    The registry is built once in the application factory and never
    modified afterwards.
    """

    def __init__(self, checks: Sequence[Tuple[str, HealthCheck]]) -> None:
        self._checks: Tuple[Tuple[str, HealthCheck], ...] = tuple(checks)

    @property
    def names(self) -> Tuple[str, ...]:
        return tuple(name for name, _ in self._checks)

    async def run(self) -> HealthReport:
        entries: Dict[str, HealthCheckResult] = {}

        for name, check in self._checks:
            started = time.perf_counter()
            try:
                result = await check.check()
            except Exception as e:
                logger.warning(f"Health check '{name}' raised: {e}")
                result = HealthCheckResult(
                    status=HealthStatus.UNHEALTHY,
                    description=f"Health check '{name}' failed.",
                    exception=str(e),
                )
            entries[name] = HealthCheckResult(
                status=result.status,
                description=result.description,
                exception=result.exception,
                duration=time.perf_counter() - started,
            )

        statuses = {result.status for result in entries.values()}
        if HealthStatus.UNHEALTHY in statuses:
            overall = HealthStatus.UNHEALTHY
        elif HealthStatus.DEGRADED in statuses:
            overall = HealthStatus.DEGRADED
        else:
            overall = HealthStatus.HEALTHY

        return HealthReport(status=overall, entries=entries)
