"""Optimizer registry — every backend is a factory registered via decorator.

Usage:
    @optimizer(name="minify", description="In-process lxml cleanup")
    class MinifyOptimizer:
        async def optimize(self, svg_text: str) -> str:
            ...

Adding a backend = one decorated class. Nothing else changes.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable

if TYPE_CHECKING:
    from svgcss.svg.optimizer import Optimizer

logger = logging.getLogger(__name__)


@dataclass
class OptimizerSpec:
    name: str
    factory: Callable[[], "Optimizer"]
    description: str = ""


class OptimizerRegistry:
    """Name → optimizer factory."""

    def __init__(self) -> None:
        self._optimizers: dict[str, OptimizerSpec] = {}

    def register(self, spec: OptimizerSpec) -> None:
        if spec.name in self._optimizers:
            raise ValueError(f"Duplicate optimizer name: {spec.name}")
        self._optimizers[spec.name] = spec
        logger.debug("Registered optimizer %s", spec.name)

    def get(self, name: str) -> OptimizerSpec:
        return self._optimizers[name]

    def create(self, name: str) -> "Optimizer":
        return self.get(name).factory()

    def all(self) -> list[OptimizerSpec]:
        return sorted(self._optimizers.values(), key=lambda s: s.name)

    def __contains__(self, name: str) -> bool:
        return name in self._optimizers

    @property
    def count(self) -> int:
        return len(self._optimizers)


# Module-level singleton
_registry = OptimizerRegistry()


def get_registry() -> OptimizerRegistry:
    return _registry


def optimizer(*, name: str, description: str = ""):
    """Decorator to register an optimizer class (or zero-arg factory)."""

    def decorator(factory: Callable[[], "Optimizer"]):
        _registry.register(OptimizerSpec(name=name, factory=factory, description=description))
        return factory

    return decorator
