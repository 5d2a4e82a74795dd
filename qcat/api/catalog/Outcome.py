"""Result of executing one catalog operation."""

from typing import Any

from pydantic import BaseModel, ConfigDict

from .Operation import Operation
from .OperationKind import OperationKind


class Outcome(BaseModel):
    """Success flag plus either a result payload or an error description."""

    model_config = ConfigDict(frozen=True)

    name: str
    kind: OperationKind
    success: bool
    result: Any = None
    error: str | None = None

    @classmethod
    def ok(cls, operation: Operation, result: Any) -> "Outcome":
        return cls(name=operation.name, kind=operation.kind, success=True, result=result)

    @classmethod
    def failed(cls, operation: Operation, error: str) -> "Outcome":
        return cls(name=operation.name, kind=operation.kind, success=False, error=error)

    def to_dict(self) -> dict[str, Any]:
        return self.model_dump(mode="json")
