"""
Validation commands for CLI.

This module provides command handlers for validating a single record,
validating a CSV batch and listing the available forms.
"""

import sys
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from ..formatters.output_formatter import OutputFormatter
from ..handlers.cli_handler import CommandHandler, CommandResult
from ....application.services.validation_service import ValidationService
from ....shared.exceptions.errors import FormcheckError
from ....shared.validation.rule_loader import load_rule_set
from ....shared.validation.validation_rules import RuleSet

STDIN_PATH = "-"


def load_record(path: str) -> Dict[str, Any]:
    """
    Load a record from a JSON or YAML file, or from stdin with ``-``.

    Raises:
        FormcheckError: If the input cannot be read or is not a mapping
    """
    try:
        if path == STDIN_PATH:
            data = yaml.safe_load(sys.stdin)
        else:
            with open(path, "r", encoding="utf-8") as f:
                data = yaml.safe_load(f)
    except (OSError, UnicodeDecodeError) as e:
        raise FormcheckError(f"Cannot read record {path}: {e}", path=path) from e
    except yaml.YAMLError as e:
        raise FormcheckError(f"Record {path} is not valid JSON or YAML: {e}", path=path) from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise FormcheckError(f"Record {path} must hold a mapping of field to value", path=path)
    return data


class _FormCommand(CommandHandler):
    """Shared form resolution for commands that validate input."""

    def __init__(
        self,
        formatter: OutputFormatter,
        service: ValidationService,
        as_json: bool = False
    ):
        super().__init__(formatter, as_json=as_json)
        self.service = service

    @staticmethod
    def _rule_set(rules_path: Optional[str]) -> Optional[RuleSet]:
        return load_rule_set(rules_path) if rules_path else None


class ValidateRecordCommand(_FormCommand):
    """Command handler that validates one record."""

    def execute(
        self,
        record_path: str,
        form: Optional[str] = None,
        rules_path: Optional[str] = None,
        **kwargs: Any
    ) -> CommandResult:
        """
        Execute the validate command.

        Args:
            record_path: Record file, or ``-`` for stdin
            form: Registered form name
            rules_path: YAML rule set file, instead of a form name

        Returns:
            CommandResult: Command execution result
        """
        try:
            record = load_record(record_path)
            result = self.service.validate_record(
                record,
                form=form,
                rule_set=self._rule_set(rules_path)
            )
        except FormcheckError as e:
            return self.handle_error(e, "Validation could not run")

        if self.as_json:
            print(self.formatter.format_json(result.to_dict()))

        if result.is_valid:
            return self.handle_success("Record is valid", data=result.to_dict())

        if not self.as_json:
            self.formatter.print(
                self.formatter.format_errors(result.errors, title="Validation errors")
            )
        return self.handle_invalid(
            f"{len(result.errors)} field(s) failed validation",
            result.to_dict()
        )


class BatchValidateCommand(_FormCommand):
    """Command handler that validates every row of a CSV file."""

    def execute(
        self,
        csv_path: str,
        form: Optional[str] = None,
        rules_path: Optional[str] = None,
        show_progress: bool = False,
        **kwargs: Any
    ) -> CommandResult:
        """
        Execute the batch command.

        Args:
            csv_path: CSV file with one record per row
            form: Registered form name
            rules_path: YAML rule set file, instead of a form name
            show_progress: Whether to display a progress bar

        Returns:
            CommandResult: Command execution result
        """
        try:
            batch = self.service.validate_csv(
                Path(csv_path),
                form=form,
                rule_set=self._rule_set(rules_path),
                show_progress=show_progress
            )
        except FormcheckError as e:
            return self.handle_error(e, "Batch validation could not run")

        if self.as_json:
            print(self.formatter.format_json(batch.to_dict()))

        if batch.is_valid:
            return self.handle_success(
                "All rows are valid",
                data=batch.to_dict(),
                details=f"{batch.total} rows checked"
            )

        if not self.as_json:
            for row in batch.failed:
                self.formatter.print(
                    self.formatter.format_errors(row.errors, title=f"Row {row.row}")
                )
        return self.handle_invalid(
            f"{len(batch.failed)} of {batch.total} rows failed validation",
            batch.to_dict()
        )


class ListFormsCommand(_FormCommand):
    """Command handler that lists registered forms."""

    def execute(self, **kwargs: Any) -> CommandResult:
        """
        Execute the forms command.

        Returns:
            CommandResult: Command execution result
        """
        names = self.service.registry.names()
        if self.as_json:
            print(self.formatter.format_json({"forms": names}))
        else:
            self.formatter.print(self.formatter.format_list(names, title="Forms"))
        return CommandResult(success=True, message=f"{len(names)} forms", data=names)
