"""Run a catalog against a database handle the caller already opened."""

from collections.abc import Iterable

from ..database.Database import Database
from .FaultPolicy import FaultPolicy
from .iter_outcomes import iter_outcomes
from .Operation import Operation
from .Outcome import Outcome


def run_catalog(
    database: Database,
    catalog: Iterable[Operation],
    policy: FaultPolicy | str = FaultPolicy.CONTINUE,
) -> list[Outcome]:
    return list(iter_outcomes(database, catalog, policy))
