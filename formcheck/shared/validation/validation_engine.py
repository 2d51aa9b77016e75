"""
Validation engine for form records.

This module evaluates rule sets against records. ``validate_form`` is
the pure entry point; ``FormValidator`` keeps a rule set that can be
built up incrementally and reused across records.
"""

import logging
from typing import Any, Dict, Iterable, List, Mapping, Optional

from .validator_interface import ErrorReport, FormValidationResult, RuleKind
from .validation_rules import RuleSet, ValidationRule
from .rule_loader import RuleLike, rule_from_descriptor, rule_set_from_dict

logger = logging.getLogger(__name__)


def validate_form(
    record: Optional[Mapping[str, Any]],
    rule_set: Mapping[str, Iterable[RuleLike]]
) -> ErrorReport:
    """
    Validate a record against a rule set.

    Fields are visited in the rule set's order. For each field the rules
    run in declaration order; every rule except ``required`` is skipped
    when the value is empty or absent. A failing rule writes its message
    into the report, replacing any message an earlier rule left for the
    same field, so the last failure wins.

    Args:
        record: Field values by name; missing fields count as empty
        rule_set: Rules by field name, as rule objects or descriptors

    Returns:
        ErrorReport: Message per failing field; passing fields are absent

    Raises:
        RuleDefinitionError: If a rule descriptor is malformed
    """
    record = record or {}
    rules_by_field = rule_set_from_dict(rule_set)
    errors: ErrorReport = {}

    for field, rules in rules_by_field.items():
        value = record.get(field)
        for rule in rules:
            if rule.kind is not RuleKind.REQUIRED and not value:
                continue
            if not rule.validate(value, record):
                errors[field] = rule.resolve_message(field)

    return errors


class FormValidator:
    """
    Reusable validator holding a rule set.

    Rules can be added and removed per field; ``validate`` applies the
    current rule set with the same semantics as ``validate_form``.
    """

    def __init__(
        self,
        rule_set: Optional[Mapping[str, Iterable[RuleLike]]] = None,
        name: Optional[str] = None
    ):
        """
        Initialize the validator.

        Args:
            rule_set: Optional initial rules by field name
            name: Optional form name reported in results and logs
        """
        self.name = name
        self._rules: RuleSet = rule_set_from_dict(rule_set) if rule_set else {}

    def add_rule(self, field: str, rule: RuleLike) -> "FormValidator":
        """
        Append a rule to a field.

        Args:
            field: Field name
            rule: Rule object or descriptor

        Returns:
            FormValidator: This validator, for chaining
        """
        self._rules.setdefault(field, []).append(rule_from_descriptor(rule))
        return self

    def add_rules(self, field: str, rules: Iterable[RuleLike]) -> "FormValidator":
        """
        Append several rules to a field, keeping their order.

        Args:
            field: Field name
            rules: Rule objects or descriptors

        Returns:
            FormValidator: This validator, for chaining
        """
        built = [rule_from_descriptor(rule) for rule in rules]
        self._rules.setdefault(field, []).extend(built)
        return self

    def remove_rule(self, field: str, rule: ValidationRule) -> None:
        """
        Remove a rule from a field.

        The field is dropped once it has no rules left.

        Raises:
            KeyError: If the field has no rules
            ValueError: If the rule is not registered for the field
        """
        rules = self._rules[field]
        rules.remove(rule)
        if not rules:
            del self._rules[field]

    def clear_rules(self, field: Optional[str] = None) -> None:
        """
        Clear validation rules.

        Args:
            field: Optional field to clear; all rules when omitted
        """
        if field:
            self._rules.pop(field, None)
        else:
            self._rules.clear()

    def get_rules(self) -> Dict[str, List[ValidationRule]]:
        """
        Get a copy of the current rule set.

        Returns:
            Dict[str, List[ValidationRule]]: Rules by field name
        """
        return {field: list(rules) for field, rules in self._rules.items()}

    @property
    def fields(self) -> List[str]:
        """Names of the fields that have rules."""
        return list(self._rules)

    def validate(self, record: Optional[Mapping[str, Any]]) -> FormValidationResult:
        """
        Validate a record against the current rule set.

        Args:
            record: Field values by name

        Returns:
            FormValidationResult: Validation result
        """
        errors = validate_form(record, self._rules)
        logger.debug(
            "Validated form %s: %d fields checked, %d failed",
            self.name or "<anonymous>",
            len(self._rules),
            len(errors)
        )
        return FormValidationResult(errors=errors, form=self.name)
