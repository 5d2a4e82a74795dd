"""Reset database command."""

from collections.abc import Iterator

from ..config.ArgumentError import ArgumentError
from ..config.QcatConfig import QcatConfig
from ..StageResult import StageResult
from .Database import Database
from .DatabaseConnectionError import DatabaseConnectionError
from .validate_database_config import validate_database_config


def cmd_reset() -> StageResult:
    """Delete every document in the configured collection. Indexes are kept."""

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        yield (0.2, "Loading configuration...")
        try:
            config = QcatConfig.load()
            validate_database_config(config.database)
        except ArgumentError as e:
            yield (1.0, "Complete")
            result_obj.result = str(e)
            result_obj.output = {
                "errors": [str(e)],
                "warnings": [],
                "database": "",
                "collection": "",
                "deleted_count": -1,
            }
            result_obj.success = False
            return

        database_config = config.database
        yield (0.6, f"Clearing {database_config.target}...")
        try:
            with Database(database_config) as database:
                deleted_count = database.delete_many({})
        except (ArgumentError, DatabaseConnectionError) as e:
            yield (1.0, "Complete")
            result_obj.result = f"Reset failed: {e}"
            result_obj.output = {
                "errors": [str(e)],
                "warnings": [],
                "database": database_config.database,
                "collection": database_config.collection,
                "deleted_count": -1,
            }
            result_obj.success = False
            return

        yield (1.0, "Complete")
        result_obj.result = f"Deleted {deleted_count} document(s) from {database_config.target}"
        result_obj.output = {
            "errors": [],
            "warnings": [],
            "database": database_config.database,
            "collection": database_config.collection,
            "deleted_count": deleted_count,
        }
        result_obj.success = True

    return StageResult(
        announce="Resetting collection...",
        progress_callback=do_work,
    )
