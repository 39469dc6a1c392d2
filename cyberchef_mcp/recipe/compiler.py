"""Recipe compilation: resolve operation names and render the recipe string."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from typing import Any

from ..catalog import OperationCatalog
from .encoding import encode_arguments
from .models import RecipeStep, ToggleValue

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CompiledStep:
    """A resolved step: canonical operation name, raw args and their literals."""

    name: str
    args: tuple[Any, ...]
    literals: tuple[str, ...]

    def render(self) -> str:
        return f"{self.name}({','.join(self.literals)})"

    def engine_args(self) -> list[Any]:
        """Raw args with toggle values dumped to plain dicts."""
        return [a.model_dump() if isinstance(a, ToggleValue) else a for a in self.args]


@dataclass(frozen=True)
class CompiledRecipe:
    """Compiled recipe: ordered resolved steps plus the recipe string."""

    steps: tuple[CompiledStep, ...]
    text: str

    def engine_steps(self) -> list[dict[str, Any]]:
        """Structured step list handed to the bake engine."""
        return [{"op": s.name, "args": s.engine_args()} for s in self.steps]


def _coerce_step(step: RecipeStep | Mapping[str, Any]) -> RecipeStep:
    if isinstance(step, RecipeStep):
        return step
    return RecipeStep.model_validate(step)


def compile_recipe(
    steps: Iterable[RecipeStep | Mapping[str, Any]],
    catalog: OperationCatalog,
) -> CompiledRecipe:
    """Compile user steps against the catalog.

    Steps are resolved in submitted order; the first unresolvable operation
    aborts compilation so a partial recipe is never returned.

    Raises:
        ResolutionError: If any step's operation has no normalized catalog match
    """
    compiled: list[CompiledStep] = []
    for step in steps:
        step = _coerce_step(step)
        op = catalog.require(step.op)
        compiled.append(
            CompiledStep(
                name=op.name,
                args=tuple(step.args),
                literals=tuple(encode_arguments(step.args)),
            )
        )

    text = "".join(s.render() for s in compiled)
    logger.debug(f"Compiled recipe ({len(compiled)} steps): {text}")
    return CompiledRecipe(steps=tuple(compiled), text=text)
