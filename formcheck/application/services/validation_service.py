"""
Application service for validating records and batches.

Resolves forms from the configured registry and validates single
records or whole CSV files row by row.
"""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Iterable, List, Mapping, Optional, Union

import pandas as pd
from tqdm import tqdm

from ...infrastructure.config.environment_config import EnvironmentConfig
from ...shared.exceptions.errors import FormcheckError
from ...shared.validation.forms import FormRegistry
from ...shared.validation.rule_loader import RuleLike, load_forms
from ...shared.validation.validation_engine import FormValidator
from ...shared.validation.validator_interface import ErrorReport, FormValidationResult

logger = logging.getLogger(__name__)


@dataclass
class RowResult:
    """Validation outcome for one row of a batch."""

    row: int
    errors: ErrorReport = field(default_factory=dict)

    @property
    def is_valid(self) -> bool:
        return not self.errors


@dataclass
class BatchResult:
    """
    Validation outcome for a batch of records.

    Rows are numbered from 1 in input order.
    """

    rows: List[RowResult] = field(default_factory=list)
    form: Optional[str] = None

    @property
    def total(self) -> int:
        return len(self.rows)

    @property
    def failed(self) -> List[RowResult]:
        return [row for row in self.rows if not row.is_valid]

    @property
    def is_valid(self) -> bool:
        return not self.failed

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert to dictionary.

        Only failing rows are listed.

        Returns:
            Dict[str, Any]: Dictionary representation
        """
        result: Dict[str, Any] = {
            "is_valid": self.is_valid,
            "total": self.total,
            "failed": len(self.failed),
            "rows": [
                {"row": row.row, "errors": dict(row.errors)}
                for row in self.failed
            ],
        }
        if self.form is not None:
            result["form"] = self.form
        return result


class ValidationService:
    """
    Service for validating records against named or ad hoc rule sets.
    """

    def __init__(
        self,
        config: Optional[EnvironmentConfig] = None,
        registry: Optional[FormRegistry] = None
    ):
        """
        Initialize the service.

        Args:
            config: Optional configuration; defaults apply when omitted
            registry: Optional form registry; built from config when omitted
        """
        self.config = config
        self.registry = registry or self._build_registry(config)

    @staticmethod
    def _build_registry(config: Optional[EnvironmentConfig]) -> FormRegistry:
        if config is None:
            return FormRegistry()

        extra_forms = {}
        forms_file = config.get_forms_file()
        if forms_file is not None:
            extra_forms = load_forms(forms_file)
            logger.info(f"Loaded {len(extra_forms)} forms from {forms_file}")

        return FormRegistry(
            extra_forms,
            include_builtin=config.include_builtin_forms()
        )

    def get_validator(
        self,
        form: Optional[str] = None,
        rule_set: Optional[Mapping[str, Iterable[RuleLike]]] = None
    ) -> FormValidator:
        """
        Resolve a validator from a form name or an explicit rule set.

        Raises:
            FormcheckError: If neither or both are given
            FormNotFoundError: If the form is not registered
        """
        if (form is None) == (rule_set is None):
            raise FormcheckError("Specify exactly one of a form name or a rule set")
        if form is not None:
            return self.registry.validator(form)
        return FormValidator(rule_set)

    def validate_record(
        self,
        record: Mapping[str, Any],
        form: Optional[str] = None,
        rule_set: Optional[Mapping[str, Iterable[RuleLike]]] = None
    ) -> FormValidationResult:
        """
        Validate a single record.

        Args:
            record: Field values by name
            form: Registered form name
            rule_set: Explicit rule set, instead of a form name

        Returns:
            FormValidationResult: Validation result
        """
        validator = self.get_validator(form, rule_set)
        result = validator.validate(record)
        if not result.is_valid:
            logger.info(
                f"Record failed validation for form {validator.name or '<rules>'}: "
                f"{sorted(result.errors)}"
            )
        return result

    def validate_records(
        self,
        records: Iterable[Mapping[str, Any]],
        form: Optional[str] = None,
        rule_set: Optional[Mapping[str, Iterable[RuleLike]]] = None,
        show_progress: bool = False
    ) -> BatchResult:
        """
        Validate a sequence of records with the same rules.

        Args:
            records: Records to validate
            form: Registered form name
            rule_set: Explicit rule set, instead of a form name
            show_progress: Whether to display a progress bar

        Returns:
            BatchResult: Per-row results
        """
        validator = self.get_validator(form, rule_set)
        batch = BatchResult(form=validator.name)

        for index, record in enumerate(
            tqdm(records, desc="Validating", unit="rows", disable=not show_progress),
            start=1
        ):
            batch.rows.append(RowResult(row=index, errors=validator.validate(record).errors))

        logger.info(
            f"Batch validation finished: {batch.total} rows, {len(batch.failed)} failed"
        )
        return batch

    def validate_frame(
        self,
        frame: pd.DataFrame,
        form: Optional[str] = None,
        rule_set: Optional[Mapping[str, Iterable[RuleLike]]] = None,
        show_progress: bool = False
    ) -> BatchResult:
        """
        Validate every row of a DataFrame.

        Missing cells are treated as absent values.
        """
        return self.validate_records(
            frame_to_records(frame),
            form=form,
            rule_set=rule_set,
            show_progress=show_progress
        )

    def validate_csv(
        self,
        path: Union[str, Path],
        form: Optional[str] = None,
        rule_set: Optional[Mapping[str, Iterable[RuleLike]]] = None,
        show_progress: bool = False
    ) -> BatchResult:
        """
        Validate every row of a CSV file.

        Cells are read as text so values such as phone numbers keep
        their leading zeros. Only empty cells count as missing; text
        such as "NA" or "null" is kept as written. The configured
        ``batch.max_rows`` limits how many rows are read.

        Raises:
            FormcheckError: If the file cannot be read
        """
        max_rows = self.config.get_batch_max_rows() if self.config else None
        try:
            frame = pd.read_csv(
                path,
                dtype=str,
                keep_default_na=False,
                na_values=[""],
                nrows=max_rows
            )
        except (
            OSError,
            UnicodeDecodeError,
            pd.errors.ParserError,
            pd.errors.EmptyDataError
        ) as e:
            raise FormcheckError(f"Cannot read CSV file {path}: {e}", path=str(path)) from e

        logger.info(f"Read {len(frame)} rows from {path}")
        return self.validate_frame(
            frame,
            form=form,
            rule_set=rule_set,
            show_progress=show_progress
        )


def frame_to_records(frame: pd.DataFrame) -> List[Dict[str, Any]]:
    """Convert DataFrame rows to records, mapping missing cells to None."""
    cleaned = frame.astype(object).where(pd.notna(frame), None)
    return cleaned.to_dict(orient="records")
