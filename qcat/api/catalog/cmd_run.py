"""Run catalog command."""

from collections.abc import Iterator

from ..config.ArgumentError import ArgumentError
from ..config.QcatConfig import QcatConfig
from ..database.Database import Database
from ..database.DatabaseConnectionError import DatabaseConnectionError
from ..database.validate_database_config import validate_database_config
from ..StageResult import StageResult
from .BOOKSTORE_CATALOG import BOOKSTORE_CATALOG
from .describe_outcome import describe_outcome
from .FaultPolicy import FaultPolicy
from .iter_outcomes import iter_outcomes
from .load_catalog import load_catalog
from .Outcome import Outcome


def cmd_run(catalog_path: str | None = None, policy: str = FaultPolicy.CONTINUE.value) -> StageResult:
    """Run a catalog against the configured collection.

    Operation failures are reported as warnings and do not fail the command;
    invalid input or an unreachable database does.
    """

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        database_name = ""
        collection_name = ""

        def fail(message: str) -> None:
            result_obj.result = message
            result_obj.output = {
                "errors": [message],
                "warnings": [],
                "database": database_name,
                "collection": collection_name,
                "policy": policy,
                "total": 0,
                "succeeded": 0,
                "failed": 0,
                "outcomes": [],
            }
            result_obj.success = False

        yield (0.05, "Loading configuration...")
        try:
            config = QcatConfig.load()
            database_name = config.database.database
            collection_name = config.database.collection
            validate_database_config(config.database)
            fault_policy = FaultPolicy(policy)
        except ArgumentError as e:
            yield (1.0, "Complete")
            fail(str(e))
            return
        except ValueError:
            yield (1.0, "Complete")
            fail(f"Unknown fault policy: {policy!r} (expected 'continue' or 'abort')")
            return

        yield (0.1, "Loading catalog...")
        try:
            operations = load_catalog(catalog_path) if catalog_path else list(BOOKSTORE_CATALOG)
        except ArgumentError as e:
            yield (1.0, "Complete")
            fail(str(e))
            return

        total = len(operations)
        outcomes: list[Outcome] = []
        yield (0.15, f"Connecting to {config.database.target}...")
        try:
            with Database(config.database) as database:
                for outcome in iter_outcomes(database, operations, fault_policy):
                    outcomes.append(outcome)
                    yield (0.15 + 0.85 * len(outcomes) / total, describe_outcome(outcome))
        except (ArgumentError, DatabaseConnectionError) as e:
            yield (1.0, "Complete")
            fail(str(e))
            return

        failed = [outcome for outcome in outcomes if not outcome.success]
        warnings = [f"{outcome.name}: {outcome.error}" for outcome in failed]
        skipped = total - len(outcomes)
        if skipped:
            warnings.append(f"Aborted after {outcomes[-1].name!r}; {skipped} operation(s) skipped")

        yield (1.0, "Complete")
        result_obj.result = (
            f"Ran {len(outcomes)}/{total} operation(s) against {config.database.target}: "
            f"{len(outcomes) - len(failed)} succeeded, {len(failed)} failed"
        )
        result_obj.output = {
            "errors": [],
            "warnings": warnings,
            "database": database_name,
            "collection": collection_name,
            "policy": fault_policy.value,
            "total": total,
            "succeeded": len(outcomes) - len(failed),
            "failed": len(failed),
            "outcomes": [outcome.to_dict() for outcome in outcomes],
        }
        result_obj.success = True

    return StageResult(
        announce="Running operation catalog...",
        progress_callback=do_work,
    )
