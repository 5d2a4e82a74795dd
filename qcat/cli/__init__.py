"""CLI - main entry point."""

import sys


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point."""
    import click

    from qcat.api.config.ArgumentError import ArgumentError
    from qcat.api.config.get_package_version import get_package_version
    from qcat.api.config.QcatConfig import QcatConfig
    from qcat.cli._create_app import _create_app
    from qcat.utils.logger import configure_logging

    if argv is None:
        argv = sys.argv[1:]

    if "--version" in argv or "-v" in argv:
        print(f"qcat {get_package_version()}")
        return 0

    try:
        log_level = QcatConfig.load().log.level
    except ArgumentError:
        # Commands report the config error themselves
        log_level = "INFO"
    configure_logging(level=log_level)

    app = _create_app()
    try:
        exit_code = app(argv, standalone_mode=False)
        return exit_code if isinstance(exit_code, int) else 0
    except SystemExit as e:
        return e.code if isinstance(e.code, int) else 1
    except click.exceptions.Abort:
        return 130
    except click.exceptions.ClickException as e:
        e.show()
        return e.exit_code
