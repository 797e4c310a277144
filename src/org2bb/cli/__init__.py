#  Copyright (c) 2025 Tom Villani, Ph.D.

"""Command-line interface for org2bb.

Usage::

    org2bb document.json -o document.bbcode
    org2bb document.json --footnote-section-title Notes --log-level DEBUG

The input is a JSON document tree as written by the Org parser. The result
is printed to stdout unless ``--output`` is given.
"""

from __future__ import annotations

import argparse
import logging
import os
import sys
from dataclasses import fields
from pathlib import Path
from typing import Any

from org2bb.api import load_document
from org2bb.ast.serialization import json_to_ast
from org2bb.cli.config import discover_config_file, load_config_file
from org2bb.constants import EXIT_RENDERING_ERROR, EXIT_SUCCESS, EXIT_VALIDATION_ERROR
from org2bb.exceptions import ParsingError, RenderingError, ValidationError
from org2bb.logging_utils import configure_logging
from org2bb.options.bbcode import BBCodeRendererOptions
from org2bb.renderers.bbcode import BBCodeRenderer

logger = logging.getLogger(__name__)

__all__ = ["create_parser", "main"]


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser, with one flag per renderer option."""
    parser = argparse.ArgumentParser(
        prog="org2bb",
        description="Transcode an Org document tree (JSON) into BBCode forum markup.",
    )
    parser.add_argument("input", help="JSON document tree, or '-' to read from stdin")
    parser.add_argument("-o", "--output", help="Output file (default: stdout)")
    parser.add_argument("--config", help="Configuration file (.toml, .yaml, .json or pyproject.toml)")
    parser.add_argument("--no-config", action="store_true", help="Ignore discovered configuration files")

    option_group = parser.add_argument_group("rendering options")
    for field in fields(BBCodeRendererOptions):
        cli_name = field.metadata.get("cli_name", field.name.replace("_", "-"))
        help_text = field.metadata.get("help", "")
        if field.type in ("bool", bool):
            option_group.add_argument(
                f"--{cli_name}",
                dest=field.name,
                action=argparse.BooleanOptionalAction,
                default=None,
                help=help_text,
            )
        else:
            option_group.add_argument(f"--{cli_name}", dest=field.name, default=None, help=help_text)

    log_group = parser.add_argument_group("logging")
    log_group.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Logging level (default: WARNING)",
    )
    log_group.add_argument("--log-file", help="Also write log messages to this file")
    log_group.add_argument("--trace", action="store_true", help="Debug logging with timestamps and logger names")
    return parser


def _setup_logging_level(parsed_args: argparse.Namespace) -> None:
    log_level = logging.DEBUG if parsed_args.trace else getattr(logging, parsed_args.log_level.upper())
    configure_logging(log_level, log_file=parsed_args.log_file, trace_mode=parsed_args.trace)


def build_options(parsed_args: argparse.Namespace) -> BBCodeRendererOptions:
    """Merge configuration file values and command-line flags into renderer options.

    Command-line flags take precedence over the configuration file.

    Raises
    ------
    argparse.ArgumentTypeError
        If the configuration file cannot be loaded
    ValidationError
        If an option value is invalid

    """
    config: dict[str, Any] = {}
    config_path = parsed_args.config or (None if parsed_args.no_config else os.environ.get("ORG2BB_CONFIG"))
    if config_path is None and not parsed_args.no_config:
        config_path = discover_config_file()
    if config_path:
        logger.info("Using configuration file: %s", config_path)
        config = load_config_file(config_path)

    options = BBCodeRendererOptions.from_mapping(config)
    overrides = {
        field.name: getattr(parsed_args, field.name)
        for field in fields(BBCodeRendererOptions)
        if getattr(parsed_args, field.name, None) is not None
    }
    return options.create_updated(**overrides) if overrides else options


def main(args: list[str] | None = None) -> int:
    """Execute the CLI and return the process exit code."""
    parser = create_parser()
    parsed_args = parser.parse_args(args)
    _setup_logging_level(parsed_args)

    try:
        options = build_options(parsed_args)
    except (argparse.ArgumentTypeError, ValidationError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_VALIDATION_ERROR

    try:
        if parsed_args.input == "-":
            document = json_to_ast(sys.stdin.read())
        else:
            document = load_document(Path(parsed_args.input))
    except ParsingError as e:
        print(f"Error: {e.message}", file=sys.stderr)
        return EXIT_VALIDATION_ERROR

    renderer = BBCodeRenderer(options)
    try:
        if parsed_args.output:
            renderer.render(document, parsed_args.output)
            logger.info("Wrote %s", parsed_args.output)
        else:
            sys.stdout.write(renderer.render_to_string(document))
    except RenderingError as e:
        print(f"Error: {e.message}", file=sys.stderr)
        return EXIT_RENDERING_ERROR

    return EXIT_SUCCESS


if __name__ == "__main__":
    sys.exit(main())
