"""List catalog operations command."""

from collections.abc import Iterator

from ..config.ArgumentError import ArgumentError
from ..StageResult import StageResult
from .BOOKSTORE_CATALOG import BOOKSTORE_CATALOG
from .load_catalog import load_catalog


def cmd_list(catalog_path: str | None = None) -> StageResult:
    """List the operations a run would execute, without connecting."""

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        source = catalog_path or "builtin"

        yield (0.5, "Loading catalog...")
        try:
            operations = load_catalog(catalog_path) if catalog_path else list(BOOKSTORE_CATALOG)
        except ArgumentError as e:
            yield (1.0, "Complete")
            result_obj.result = str(e)
            result_obj.output = {"errors": [str(e)], "warnings": [], "source": source, "operations": []}
            result_obj.success = False
            return

        yield (1.0, "Complete")
        result_obj.result = f"Found {len(operations)} operation(s) in {source} catalog"
        result_obj.output = {
            "errors": [],
            "warnings": [],
            "source": source,
            "operations": [operation.model_dump(mode="json") for operation in operations],
        }
        result_obj.success = True

    return StageResult(
        announce="Listing catalog operations...",
        progress_callback=do_work,
    )
