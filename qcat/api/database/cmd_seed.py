"""Seed the configured collection with the sample bookstore documents."""

from collections.abc import Iterator

from ..config.ArgumentError import ArgumentError
from ..config.QcatConfig import QcatConfig
from ..StageResult import StageResult
from .Database import Database
from .DatabaseConnectionError import DatabaseConnectionError
from .validate_database_config import validate_database_config
from .SAMPLE_BOOKS import SAMPLE_BOOKS


def cmd_seed(replace: bool = False) -> StageResult:
    """Insert SAMPLE_BOOKS; with ``replace`` empty the collection first."""

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
                "deleted_count": 0,
                "inserted_count": 0,
            }
            result_obj.success = False
            return

        database_config = config.database
        deleted_count = 0
        yield (0.5, f"Seeding {database_config.target}...")
        try:
            with Database(database_config) as database:
                if replace:
                    deleted_count = database.delete_many({})
                # insert_many adds _id to each document; hand it copies
                inserted_count = database.insert_many([dict(book) for book in SAMPLE_BOOKS])
        except (ArgumentError, DatabaseConnectionError) as e:
            yield (1.0, "Complete")
            result_obj.result = str(e)
            result_obj.output = {
                "errors": [str(e)],
                "warnings": [],
                "database": database_config.database,
                "collection": database_config.collection,
                "deleted_count": 0,
                "inserted_count": 0,
            }
            result_obj.success = False
            return

        yield (1.0, "Complete")
        result_obj.result = f"Inserted {inserted_count} book(s) into {database_config.target}"
        result_obj.output = {
            "errors": [],
            "warnings": [],
            "database": database_config.database,
            "collection": database_config.collection,
            "deleted_count": deleted_count,
            "inserted_count": inserted_count,
        }
        result_obj.success = True

    return StageResult(
        announce="Seeding sample books...",
        progress_callback=do_work,
    )
