"""Run a catalog with a connection scoped to the call."""

from collections.abc import Sequence

from ...utils.logger import get_logger
from ..config.ArgumentError import ArgumentError
from ..database.Database import Database
from ..database.DatabaseConfig import DatabaseConfig
from ..database.validate_database_config import validate_database_config
from .FaultPolicy import FaultPolicy
from .Operation import Operation
from .Outcome import Outcome
from .run_catalog import run_catalog

logger = get_logger("catalog.run")


def run(
    config: DatabaseConfig,
    catalog: Sequence[Operation],
    policy: FaultPolicy | str = FaultPolicy.CONTINUE,
) -> list[Outcome]:
    """Open one connection, execute every operation in order, close the connection.

    Operation faults never escape: each becomes a failed Outcome. With
    ``FaultPolicy.CONTINUE`` the result has one Outcome per operation; with
    ``FaultPolicy.ABORT`` it ends at the first failed Outcome.

    Args:
        config: Where to connect
        catalog: Operations to execute, in order (may be empty)
        policy: What to do after an operation fails

    Returns:
        Outcomes in catalog order

    Raises:
        ArgumentError: If config, catalog or policy are malformed (nothing is executed)
        DatabaseConnectionError: If the database cannot be reached
    """
    validate_database_config(config)
    try:
        policy = FaultPolicy(policy)
    except ValueError as e:
        raise ArgumentError(f"Unknown fault policy: {policy!r}") from e
    operations = list(catalog)
    for index, operation in enumerate(operations):
        if not isinstance(operation, Operation):
            raise ArgumentError(f"Catalog entry {index} is not an Operation (found: {type(operation).__name__})")

    logger.info(f"Running {len(operations)} operation(s) against {config.target} (policy={policy.value})")
    with Database(config) as database:
        outcomes = run_catalog(database, operations, policy)

    failed = sum(1 for outcome in outcomes if not outcome.success)
    logger.info(f"Run finished: {len(outcomes)} executed, {failed} failed")
    return outcomes
