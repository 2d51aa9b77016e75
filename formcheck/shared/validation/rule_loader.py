"""
Rule loader for declarative rule definitions.

Rules can be written as plain descriptors, the shape form screens use
inline::

    {"type": "minLength", "value": 3, "message": "Too short"}

and rule sets can be kept in YAML files, one list of descriptors per
field. Malformed descriptors raise RuleDefinitionError instead of being
skipped.
"""

import importlib
import logging
from pathlib import Path
from typing import Any, Callable, Dict, Iterable, Mapping, Union

import yaml

from ..exceptions.errors import RuleDefinitionError, RuleSetLoadError
from .validator_interface import RuleKind
from .validation_rules import (
    RULE_CLASSES,
    CustomRule,
    RuleSet,
    ValidationRule,
    LengthRule
)

logger = logging.getLogger(__name__)

RuleLike = Union[ValidationRule, Mapping[str, Any]]

_DESCRIPTOR_KEYS = {"type", "kind", "message", "value", "validator"}


def parse_kind(name: Any) -> RuleKind:
    """
    Resolve a rule kind from its name.

    Args:
        name: Kind name such as ``"idCard"``, or a RuleKind

    Returns:
        RuleKind: Matching kind

    Raises:
        RuleDefinitionError: If the name is not a known kind
    """
    if isinstance(name, RuleKind):
        return name
    try:
        return RuleKind(name)
    except ValueError:
        known = ", ".join(kind.value for kind in RuleKind)
        raise RuleDefinitionError(
            f"Unknown rule type {name!r}; expected one of: {known}",
            kind=str(name)
        ) from None


def import_validator(path: str) -> Callable[..., Any]:
    """
    Import a predicate from a ``"package.module:function"`` path.

    Raises:
        RuleDefinitionError: If the path is malformed, cannot be imported
            or does not name a callable
    """
    module_name, sep, attr = path.partition(":")
    if not sep or not module_name or not attr:
        raise RuleDefinitionError(
            f"Validator path must look like 'package.module:function', got {path!r}",
            kind=RuleKind.CUSTOM.value
        )
    try:
        module = importlib.import_module(module_name)
    except ImportError as e:
        raise RuleDefinitionError(
            f"Cannot import validator module {module_name!r}: {e}",
            kind=RuleKind.CUSTOM.value
        ) from e

    target: Any = module
    for part in attr.split("."):
        try:
            target = getattr(target, part)
        except AttributeError:
            raise RuleDefinitionError(
                f"Validator {attr!r} not found in module {module_name!r}",
                kind=RuleKind.CUSTOM.value
            ) from None

    if not callable(target):
        raise RuleDefinitionError(
            f"Validator {path!r} is not callable",
            kind=RuleKind.CUSTOM.value
        )
    return target


def rule_from_descriptor(descriptor: RuleLike) -> ValidationRule:
    """
    Build a rule from a descriptor.

    Args:
        descriptor: Mapping with ``type`` (or ``kind``) and optionally
            ``message``, ``value`` (length rules) and ``validator``
            (custom rules, a callable or an import path). Rule
            instances are returned unchanged.

    Returns:
        ValidationRule: The built rule

    Raises:
        RuleDefinitionError: If the descriptor is incomplete or carries
            parameters its kind does not take
    """
    if isinstance(descriptor, ValidationRule):
        return descriptor
    if not isinstance(descriptor, Mapping):
        raise RuleDefinitionError(
            f"Rule must be a mapping or a ValidationRule, got {type(descriptor).__name__}"
        )

    unknown = set(descriptor) - _DESCRIPTOR_KEYS
    if unknown:
        raise RuleDefinitionError(
            f"Unknown rule keys: {', '.join(sorted(map(str, unknown)))}"
        )

    if "type" not in descriptor and "kind" not in descriptor:
        raise RuleDefinitionError("Rule is missing its 'type'")
    kind = parse_kind(descriptor.get("type", descriptor.get("kind")))
    rule_class = RULE_CLASSES[kind]
    message = descriptor.get("message")
    if message is not None and not isinstance(message, str):
        raise RuleDefinitionError("Rule message must be a string", kind=kind.value)

    if issubclass(rule_class, LengthRule):
        if "value" not in descriptor:
            raise RuleDefinitionError(
                f"{kind.value} rule requires a 'value' bound",
                kind=kind.value
            )
        _reject_keys(descriptor, kind, "validator")
        return rule_class(descriptor["value"], message=message)

    if rule_class is CustomRule:
        if "validator" not in descriptor:
            raise RuleDefinitionError(
                "custom rule requires a 'validator'",
                kind=kind.value
            )
        _reject_keys(descriptor, kind, "value")
        validator = descriptor["validator"]
        if isinstance(validator, str):
            validator = import_validator(validator)
        return CustomRule(validator, message=message)

    _reject_keys(descriptor, kind, "value", "validator")
    return rule_class(message=message)


def _reject_keys(descriptor: Mapping[str, Any], kind: RuleKind, *keys: str) -> None:
    for key in keys:
        if key in descriptor:
            raise RuleDefinitionError(
                f"{kind.value} rule does not take a '{key}'",
                kind=kind.value
            )


def rule_set_from_dict(mapping: Mapping[str, Iterable[RuleLike]]) -> RuleSet:
    """
    Build a rule set from a mapping of field name to rule descriptors.

    Field order is preserved.

    Raises:
        RuleDefinitionError: If any rule is malformed
    """
    if not isinstance(mapping, Mapping):
        raise RuleDefinitionError(
            f"Rule set must be a mapping of field to rules, got {type(mapping).__name__}"
        )

    rule_set: RuleSet = {}
    for field, rules in mapping.items():
        if isinstance(rules, (str, bytes, Mapping)) or not isinstance(rules, Iterable):
            raise RuleDefinitionError(
                f"Rules for field {field!r} must be a list",
                field=field
            )
        try:
            rule_set[str(field)] = [rule_from_descriptor(rule) for rule in rules]
        except RuleDefinitionError as e:
            e.details.setdefault("field", field)
            raise
    return rule_set


def _read_yaml(path: Union[str, Path]) -> Any:
    file_path = Path(path)
    if not file_path.exists():
        raise RuleSetLoadError(f"Rule file not found: {file_path}", path=str(file_path))
    try:
        with open(file_path, "r", encoding="utf-8") as f:
            return yaml.safe_load(f)
    except (OSError, UnicodeDecodeError) as e:
        raise RuleSetLoadError(f"Cannot read rule file {file_path}: {e}", path=str(file_path)) from e
    except yaml.YAMLError as e:
        raise RuleSetLoadError(f"Invalid YAML in {file_path}: {e}", path=str(file_path)) from e


def load_rule_set(path: Union[str, Path]) -> RuleSet:
    """
    Load a rule set from a YAML file.

    The file holds a mapping of field name to a list of descriptors::

        email:
          - type: required
          - type: email

    Args:
        path: YAML file path

    Returns:
        RuleSet: Loaded rule set

    Raises:
        RuleSetLoadError: If the file is missing or not valid YAML
        RuleDefinitionError: If any rule is malformed
    """
    data = _read_yaml(path)
    if data is None:
        data = {}
    rule_set = rule_set_from_dict(data)
    logger.debug("Loaded rule set from %s (%d fields)", path, len(rule_set))
    return rule_set


def load_forms(path: Union[str, Path]) -> Dict[str, RuleSet]:
    """
    Load several named rule sets from a YAML file.

    The file holds a top-level ``forms`` mapping of form name to rule set.

    Args:
        path: YAML file path

    Returns:
        Dict[str, RuleSet]: Rule sets by form name

    Raises:
        RuleSetLoadError: If the file is missing, not valid YAML or has
            no ``forms`` mapping
        RuleDefinitionError: If any rule is malformed
    """
    data = _read_yaml(path)
    if not isinstance(data, Mapping) or not isinstance(data.get("forms"), Mapping):
        raise RuleSetLoadError(f"Expected a 'forms' mapping in {path}", path=str(path))

    forms: Dict[str, RuleSet] = {}
    for name, mapping in data["forms"].items():
        try:
            forms[str(name)] = rule_set_from_dict(mapping or {})
        except RuleDefinitionError as e:
            e.details.setdefault("form", name)
            raise
    logger.debug("Loaded %d forms from %s", len(forms), path)
    return forms
