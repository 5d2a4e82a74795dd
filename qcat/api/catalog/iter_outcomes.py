"""Execute a catalog against an open database, one outcome at a time."""

from collections.abc import Iterable, Iterator

from ...utils.logger import get_logger
from ..database.Database import Database
from ._dispatch_operation import _dispatch_operation
from .FaultPolicy import FaultPolicy
from .Operation import Operation
from .OperationError import OperationError
from .Outcome import Outcome

logger = get_logger("catalog.run")


def iter_outcomes(
    database: Database,
    catalog: Iterable[Operation],
    policy: FaultPolicy | str = FaultPolicy.CONTINUE,
) -> Iterator[Outcome]:
    """Yield one Outcome per executed operation, in catalog order.

    A failing operation is yielded as a failed Outcome. Under
    ``FaultPolicy.ABORT`` iteration stops right after it.

    Raises:
        RuntimeError: If ``database`` is not open
    """
    policy = FaultPolicy(policy)
    if not database.is_open:
        raise RuntimeError("Cannot run operations on a database that is not open")

    for operation in catalog:
        logger.info(f"Running {operation.name!r} ({operation.kind.value})")
        try:
            result = _dispatch_operation(database, operation)
        except OperationError as exc:
            logger.warning(str(exc))
            yield Outcome.failed(operation, exc.description)
            if policy is FaultPolicy.ABORT:
                logger.warning(f"Aborting run after {operation.name!r}")
                return
            continue
        yield Outcome.ok(operation, result)
