"""Command line interface for egov-markdown."""
from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Optional

import typer

from egov_markdown.config.loader import load_config
from egov_markdown.config.schema import LoggingConfig
from egov_markdown.convert import convert_file
from egov_markdown.errors import ConversionError
from egov_markdown.logging import configure_logging

app = typer.Typer(help="Convert e-Gov law XML into Markdown")


@app.command()
def convert(
    input_path: Optional[Path] = typer.Argument(None, help="e-Gov XML file. Defaults to config value."),
    output: Optional[Path] = typer.Option(None, "--output", "-o", help="Destination Markdown file."),
    config: Optional[Path] = typer.Option(None, help="Path to YAML config."),
    log_level: Optional[str] = typer.Option(None, help="Override logging level."),
) -> None:
    """Convert one XML file into one Markdown file.

    Args:
        input_path: Source XML path overriding the config.
        output: Destination path overriding the config.
        config: Optional configuration YAML file.
        log_level: Optional logging level override.
    """
    cfg = load_config(config)
    if log_level is not None:
        cfg.logging = LoggingConfig(level=log_level, log_file=cfg.logging.log_file)
    configure_logging(cfg.logging)

    source = input_path or cfg.conversion.input_path
    destination = output or cfg.conversion.output_path
    logger = logging.getLogger(__name__)
    try:
        convert_file(source, destination)
    except ConversionError as exc:
        logger.error("Conversion failed: %s", exc)
        raise typer.Exit(code=1) from exc
    typer.echo(f"Saved {destination}")


@app.command()
def show_config(
    config: Optional[Path] = typer.Option(None, help="Path to YAML config."),
) -> None:
    """Print the effective configuration.

    Args:
        config: Optional configuration YAML file.
    """
    cfg = load_config(config)
    data = cfg.model_dump(mode="json")
    data["logging"]["level"] = cfg.logging.level.value.value
    typer.echo(json.dumps(data, ensure_ascii=False, indent=2))


def main() -> None:
    """Entrypoint for console_scripts."""
    app()


if __name__ == "__main__":
    main()
