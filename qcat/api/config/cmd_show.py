"""Show effective configuration command."""

from collections.abc import Iterator

from ..StageResult import StageResult
from .ArgumentError import ArgumentError
from .QcatConfig import QcatConfig


def cmd_show() -> StageResult:
    """Show the configuration qcat would run with."""

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        path = QcatConfig.get_config_path()

        yield (0.5, "Loading configuration...")
        try:
            config = QcatConfig.load()
        except ArgumentError as e:
            yield (1.0, "Complete")
            result_obj.result = str(e)
            result_obj.output = {
                "errors": [str(e)],
                "warnings": [],
                "path": str(path),
                "exists": path.exists(),
                "config": {},
            }
            result_obj.success = False
            return

        warnings = [] if path.exists() else [f"No config file at {path}; using defaults"]
        yield (1.0, "Complete")
        result_obj.result = f"Configuration for {config.database.target}"
        result_obj.output = {
            "errors": [],
            "warnings": warnings,
            "path": str(path),
            "exists": path.exists(),
            "config": config.to_dict(),
        }
        result_obj.success = True

    return StageResult(
        announce="Loading configuration...",
        progress_callback=do_work,
    )
