"""One named entry of an operation catalog."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator

from .OperationKind import OperationKind

# kind -> (required argument names, optional argument names)
_ARGUMENTS: dict[OperationKind, tuple[frozenset[str], frozenset[str]]] = {
    OperationKind.FIND: (frozenset(), frozenset({"filter", "projection", "sort", "limit"})),
    OperationKind.UPDATE_ONE: (frozenset({"filter", "update"}), frozenset({"upsert"})),
    OperationKind.DELETE_ONE: (frozenset({"filter"}), frozenset()),
    OperationKind.AGGREGATE: (frozenset({"pipeline"}), frozenset()),
    OperationKind.CREATE_INDEX: (frozenset({"keys"}), frozenset({"name", "unique"})),
    OperationKind.LIST_INDEXES: (frozenset(), frozenset()),
}

_INDEX_TYPES = frozenset({"text", "hashed", "2d", "2dsphere"})


def _key_pairs(value: Any, argument: str, special: frozenset[str] = frozenset()) -> list[tuple[str, Any]]:
    """Normalize ``{"a": 1}`` or ``[["a", 1]]`` into ``[("a", 1)]``.

    ``special`` lists string directions allowed besides 1 and -1.
    """
    if isinstance(value, dict):
        pairs = list(value.items())
    elif isinstance(value, (list, tuple)):
        pairs = []
        for item in value:
            if not isinstance(item, (list, tuple)) or len(item) != 2:
                raise ValueError(f"{argument} entries must be [field, direction] pairs (found: {item!r})")
            pairs.append((item[0], item[1]))
    else:
        raise ValueError(f"{argument} must be a dict or a list of [field, direction] pairs")
    if not pairs:
        raise ValueError(f"{argument} must name at least one field")
    for field, direction in pairs:
        if not isinstance(field, str) or not field:
            raise ValueError(f"{argument} field names must be non-empty strings (found: {field!r})")
        if isinstance(direction, str) and direction in special:
            continue
        if isinstance(direction, bool) or direction not in (1, -1):
            raise ValueError(f"{argument} direction for {field!r} must be 1 or -1 (found: {direction!r})")
    return pairs


class Operation(BaseModel):
    """A named read, write, aggregate or index call with its arguments."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    name: str = Field(..., min_length=1, description="Name used when reporting the outcome")
    kind: OperationKind = Field(..., description="Database capability to call")
    arguments: dict[str, Any] = Field(default_factory=dict, description="Query, update, pipeline or key spec")

    @model_validator(mode="after")
    def validate_arguments(self) -> "Operation":
        required, optional = _ARGUMENTS[self.kind]
        given = set(self.arguments)
        missing = required - given
        if missing:
            raise ValueError(f"{self.kind.value} requires argument(s): {sorted(missing)}")
        unknown = given - required - optional
        if unknown:
            raise ValueError(f"{self.kind.value} does not accept argument(s): {sorted(unknown)}")

        for argument in ("filter", "update", "projection"):
            if argument in self.arguments and not isinstance(self.arguments[argument], dict):
                raise ValueError(f"{argument} must be a dict")
        if "pipeline" in self.arguments:
            pipeline = self.arguments["pipeline"]
            if not isinstance(pipeline, list) or not all(isinstance(stage, dict) for stage in pipeline):
                raise ValueError("pipeline must be a list of stage dicts")
        if "limit" in self.arguments:
            limit = self.arguments["limit"]
            if isinstance(limit, bool) or not isinstance(limit, int) or limit < 0:
                raise ValueError("limit must be a non-negative integer")
        if "sort" in self.arguments:
            _key_pairs(self.arguments["sort"], "sort")
        if "keys" in self.arguments:
            _key_pairs(self.arguments["keys"], "keys", _INDEX_TYPES)
        return self

    def sort_pairs(self) -> list[tuple[str, int]] | None:
        if "sort" not in self.arguments:
            return None
        return _key_pairs(self.arguments["sort"], "sort")

    def index_keys(self) -> list[tuple[str, Any]]:
        return _key_pairs(self.arguments["keys"], "keys", _INDEX_TYPES)
