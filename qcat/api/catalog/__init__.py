"""Operation catalog: named database operations run in order against one collection."""

from .BOOKSTORE_CATALOG import BOOKSTORE_CATALOG
from .describe_outcome import describe_outcome
from .FaultPolicy import FaultPolicy
from .iter_outcomes import iter_outcomes
from .load_catalog import load_catalog
from .Operation import Operation
from .OperationError import OperationError
from .OperationKind import OperationKind
from .Outcome import Outcome
from .run import run
from .run_catalog import run_catalog

__all__ = [
    "BOOKSTORE_CATALOG",
    "FaultPolicy",
    "Operation",
    "OperationError",
    "OperationKind",
    "Outcome",
    "describe_outcome",
    "iter_outcomes",
    "load_catalog",
    "run",
    "run_catalog",
]
