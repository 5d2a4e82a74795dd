"""Load an operation catalog from a JSON or YAML file."""

import json
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from ..config.ArgumentError import ArgumentError
from .Operation import Operation


def load_catalog(path: str | Path) -> list[Operation]:
    """Load operations from ``path``.

    The file holds either a list of operations or ``{"operations": [...]}``;
    each operation is ``{"name": ..., "kind": ..., "arguments": {...}}``.

    Raises:
        ArgumentError: If the file is missing, unparseable, or an entry is invalid
    """
    path = Path(path).expanduser()
    if not path.is_file():
        raise ArgumentError(f"Catalog file not found: {path}")

    suffix = path.suffix.lower()
    try:
        with path.open(encoding="utf-8") as fh:
            if suffix == ".json":
                raw: Any = json.load(fh)
            elif suffix in (".yaml", ".yml"):
                raw = yaml.safe_load(fh)
            else:
                raise ArgumentError(f"Unsupported catalog format {suffix!r} (expected .json, .yaml or .yml)")
    except (json.JSONDecodeError, yaml.YAMLError) as e:
        raise ArgumentError(f"Could not parse catalog {path}: {e}") from e

    if isinstance(raw, dict) and "operations" in raw:
        raw = raw["operations"]
    if raw is None:
        raw = []
    if not isinstance(raw, list):
        raise ArgumentError(f"Catalog {path} must hold a list of operations")

    operations = []
    for index, entry in enumerate(raw):
        try:
            operations.append(Operation.model_validate(entry))
        except ValidationError as e:
            first = (e.errors() or [{"msg": str(e)}])[0]
            raise ArgumentError(f"Catalog {path} entry {index}: {first.get('msg', str(e))}") from e
    return operations
