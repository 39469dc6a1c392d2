"""Operation catalog: loading, name normalization and resolution."""

from __future__ import annotations

import json
import logging
import re
from collections.abc import Iterator, Mapping
from dataclasses import dataclass
from importlib import resources
from pathlib import Path
from types import MappingProxyType
from typing import Any

import httpx
import yaml
from rapidfuzz import fuzz, process, utils

logger = logging.getLogger(__name__)

_NON_ALNUM_RE = re.compile(r"[^a-z0-9]")

BUNDLED_CATALOG = "operations.json"


class CatalogError(Exception):
    """Operation catalog could not be loaded or parsed."""

    pass


class ResolutionError(Exception):
    """Operation name has no normalized match in the catalog."""

    def __init__(self, op_name: str, suggestions: list[str] | None = None) -> None:
        self.op_name = op_name
        self.suggestions = list(suggestions or [])
        msg = f'No matching operation for "{op_name}"'
        if self.suggestions:
            msg += " (did you mean: " + ", ".join(f'"{s}"' for s in self.suggestions) + "?)"
        super().__init__(msg)


def normalize_op_name(name: str) -> str:
    """Reduce an operation name to its comparison key (lowercase alphanumerics)."""
    return _NON_ALNUM_RE.sub("", name.lower())


@dataclass(frozen=True)
class OperationDescriptor:
    """Catalog entry for a single operation."""

    name: str
    description: str | None = None
    args: tuple[dict[str, Any], ...] | None = None
    # Metadata below is carried from OperationConfig.json but unused by the bridge
    module: str | None = None
    info_url: str | None = None
    input_type: str | None = None
    output_type: str | None = None
    flow_control: bool = False
    manual_bake: bool = False
    checks: tuple[Any, ...] | None = None

    @classmethod
    def from_config(cls, name: str, entry: Any) -> "OperationDescriptor":
        """Build descriptor from an OperationConfig.json entry."""
        if not isinstance(entry, dict):
            raise CatalogError(f"Operation '{name}' must be an object, got {type(entry).__name__}")

        args = entry.get("args")
        checks = entry.get("checks")
        return cls(
            name=name,
            description=entry.get("description"),
            args=tuple(args) if isinstance(args, list) else None,
            module=entry.get("module"),
            info_url=entry.get("infoURL"),
            input_type=entry.get("inputType"),
            output_type=entry.get("outputType"),
            flow_control=bool(entry.get("flowControl")),
            manual_bake=bool(entry.get("manualBake")),
            checks=tuple(checks) if isinstance(checks, list) else None,
        )

    def summary(self) -> dict[str, Any]:
        """Return the {name, description, args} view exposed to callers."""
        return {
            "name": self.name,
            "description": self.description,
            "args": list(self.args) if self.args is not None else None,
        }


class OperationCatalog(Mapping[str, OperationDescriptor]):
    """Read-only mapping of operation name to descriptor, in source order.

    Lookups through ``resolve``/``find_matches`` are case and punctuation
    insensitive. If two names normalize to the same key the first one in
    catalog order wins.
    """

    def __init__(self, operations: Mapping[str, OperationDescriptor]) -> None:
        self._ops = MappingProxyType(dict(operations))
        index: dict[str, str] = {}
        for name in self._ops:
            key = normalize_op_name(name)
            if key in index:
                logger.warning(f"Operation '{name}' collides with '{index[key]}' after normalization")
                continue
            index[key] = name
        self._index = MappingProxyType(index)

    def __getitem__(self, name: str) -> OperationDescriptor:
        return self._ops[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._ops)

    def __len__(self) -> int:
        return len(self._ops)

    def names(self) -> list[str]:
        return list(self._ops)

    def resolve(self, name: str) -> OperationDescriptor | None:
        """Return the first descriptor whose normalized name matches, or None."""
        actual = self._index.get(normalize_op_name(name))
        return self._ops[actual] if actual is not None else None

    def find_matches(self, name: str) -> list[OperationDescriptor]:
        """Return every descriptor whose normalized name matches."""
        key = normalize_op_name(name)
        return [op for op_name, op in self._ops.items() if normalize_op_name(op_name) == key]

    def require(self, name: str) -> OperationDescriptor:
        """Resolve or raise ResolutionError with close-match suggestions."""
        op = self.resolve(name)
        if op is None:
            raise ResolutionError(name, self.suggest(name))
        return op

    def suggest(self, name: str, limit: int = 3, score_cutoff: float = 70.0) -> list[str]:
        """Closest operation names by fuzzy score (RapidFuzz WRatio)."""
        if not name or not self._ops:
            return []
        matches = process.extract(
            name,
            list(self._ops),
            scorer=fuzz.WRatio,
            processor=utils.default_process,
            limit=limit,
            score_cutoff=score_cutoff,
        )
        return [m[0] for m in matches]


def parse_catalog(raw: str) -> OperationCatalog:
    """Parse OperationConfig JSON (or YAML) text into a catalog."""
    try:
        if raw.strip().startswith("{"):
            data = json.loads(raw)
        else:
            data = yaml.safe_load(raw)
    except (json.JSONDecodeError, yaml.YAMLError) as e:
        raise CatalogError(f"Failed to parse operation catalog: {e}") from e

    if not isinstance(data, dict):
        raise CatalogError("Operation catalog root is not an object")

    return OperationCatalog(
        {str(name): OperationDescriptor.from_config(str(name), entry) for name, entry in data.items()}
    )


def _read_source(source: str) -> str:
    if source.startswith(("http://", "https://")):
        try:
            resp = httpx.get(source, timeout=30.0, follow_redirects=True)
            resp.raise_for_status()
        except httpx.HTTPError as e:
            raise CatalogError(f"Failed to fetch operation catalog from {source}: {e}") from e
        return resp.text

    try:
        return Path(source).expanduser().read_text(encoding="utf-8")
    except OSError as e:
        raise CatalogError(f"Failed to read operation catalog {source}: {e}") from e


def load_catalog(source: str | None = None) -> OperationCatalog:
    """Load catalog from a file path or URL; bundled catalog when source is empty.

    Raises:
        CatalogError: If the source cannot be read or is not an operation mapping
    """
    if source:
        raw = _read_source(source)
        origin = source
    else:
        raw = (resources.files("cyberchef_mcp") / "data" / BUNDLED_CATALOG).read_text(
            encoding="utf-8"
        )
        origin = f"bundled {BUNDLED_CATALOG}"

    catalog = parse_catalog(raw)
    logger.info(f"Loaded {len(catalog)} operations from {origin}")
    return catalog
