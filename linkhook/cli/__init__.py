"""CLI - main entry point."""

import sys


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point.

    Usage errors and aborts are reported by the click that typer runs on, which
    exits with its own code (2 for usage errors, 1 for aborts).
    """
    from linkhook.api.config.ConfigurationError import ConfigurationError
    from linkhook.api.config.LinkhookConfig import LinkhookConfig
    from linkhook.cli._create_app import _create_app
    from linkhook.utils.configure_logging import configure_logging

    if argv is None:
        argv = sys.argv[1:]

    # Configuration errors are reported by the commands themselves
    try:
        log_level = LinkhookConfig.load().log.level
    except ConfigurationError:
        log_level = "INFO"
    configure_logging(LinkhookConfig.get_home_dir(), log_level)

    app = _create_app()
    try:
        app(argv, prog_name="linkhook")
    except SystemExit as e:
        if e.code is None:
            return 0
        return e.code if isinstance(e.code, int) else 1
    return 0
