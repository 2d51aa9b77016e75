"""
Command-line entry point for formcheck.

Usage::

    formcheck validate --form register record.json
    formcheck batch --rules rules.yaml users.csv --json
    formcheck forms
"""

import argparse
import sys
from typing import List, Optional

from .commands.validation_commands import (
    BatchValidateCommand,
    ListFormsCommand,
    ValidateRecordCommand
)
from .formatters.output_formatter import OutputFormatter
from .handlers.cli_handler import EXIT_ERROR
from ...application.services.validation_service import ValidationService
from ...infrastructure.config.config_manager import ConfigManager
from ...shared.exceptions.error_context import ErrorContextManager
from ...shared.exceptions.errors import FormcheckError
from ...shared.logging.logger_interface import LogLevel
from ...shared.logging.structured_logger import configure_logging


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog="formcheck",
        description="Validate form records against declarative rule sets"
    )

    parser.add_argument('--config', type=str,
                        help='Configuration directory holding base.yaml')
    parser.add_argument('--env', type=str,
                        help='Configuration environment (default: FORMCHECK_ENV or development)')
    parser.add_argument('--log-level', type=str,
                        choices=[level.value for level in LogLevel],
                        help='Override the configured log level')
    parser.add_argument('--json', action='store_true',
                        help='Print results as JSON')

    subparsers = parser.add_subparsers(dest="command", required=True)

    validate = subparsers.add_parser('validate', help='Validate a single record')
    _add_form_arguments(validate)
    validate.add_argument('record', type=str,
                          help="JSON or YAML record file, or '-' for stdin")

    batch = subparsers.add_parser('batch', help='Validate every row of a CSV file')
    _add_form_arguments(batch)
    batch.add_argument('csv', type=str, help='CSV file with one record per row')
    batch.add_argument('--progress', action='store_true',
                       help='Show a progress bar')

    subparsers.add_parser('forms', help='List available forms')

    return parser


def _add_form_arguments(parser: argparse.ArgumentParser) -> None:
    group = parser.add_mutually_exclusive_group(required=True)
    group.add_argument('--form', type=str, help='Name of a registered form')
    group.add_argument('--rules', type=str, help='YAML rule set file')


def main(argv: Optional[List[str]] = None) -> int:
    """
    Run the CLI.

    Returns:
        int: 0 when input is valid, 1 when it fails validation,
            2 when validation could not run
    """
    args = build_parser().parse_args(argv)
    formatter = OutputFormatter(use_rich=not args.json)

    try:
        config = ConfigManager(args.config, args.env).load_config()
    except FormcheckError as e:
        context = ErrorContextManager.create_context(e)
        print(ErrorContextManager.format_context(context), file=sys.stderr)
        return EXIT_ERROR

    logger = configure_logging(
        "formcheck",
        level=args.log_level or config.get_log_level(),
        output=sys.stderr
    )
    logger.add_context(command=args.command)
    logger.debug("Configuration loaded", config_dir=args.config, environment=args.env)

    try:
        service = ValidationService(config)
    except FormcheckError as e:
        logger.exception("Could not load forms", exc_info=e)
        formatter.print(formatter.format_error("Could not load forms", str(e)))
        return EXIT_ERROR

    if args.command == "validate":
        command = ValidateRecordCommand(formatter, service, as_json=args.json)
        result = command.execute(
            record_path=args.record,
            form=args.form,
            rules_path=args.rules
        )
    elif args.command == "batch":
        command = BatchValidateCommand(formatter, service, as_json=args.json)
        result = command.execute(
            csv_path=args.csv,
            form=args.form,
            rules_path=args.rules,
            show_progress=args.progress
        )
    else:
        result = ListFormsCommand(formatter, service, as_json=args.json).execute()

    logger.info(result.message, success=result.success, exit_code=result.exit_code)
    return result.exit_code


if __name__ == "__main__":
    sys.exit(main())
