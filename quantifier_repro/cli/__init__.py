"""quantifier-repro CLI module."""

from pathlib import Path

# Global settings file path, set by main_callback() at CLI startup
SETTINGS_PATH: Path | None = None


def main() -> None:
    """CLI entry point."""
    from quantifier_repro.cli.app import main as app_main

    app_main()


__all__ = ["SETTINGS_PATH", "main"]
