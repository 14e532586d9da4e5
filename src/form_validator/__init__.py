"""
@Author: li
@Email: lijianqiao2906@live.com
@FileName: __init__.py
@DateTime: 2026-10-19
@Docs: Package exports for form_validator.
form_validator 包导出定义。
"""

from form_validator.config import ValidatorConfig, resolve_config
from form_validator.exceptions import ConfigError, FormValidatorError, RuleError, ValidationError
from form_validator.patterns import PATTERNS, get_pattern
from form_validator.rules import (
    equal_to,
    is_email,
    is_id_card,
    is_mobile,
    is_price,
    max_length,
    max_value,
    min_length,
    min_value,
    parse_float,
    range_length,
    regular,
    required,
    value_range,
)
from form_validator.schemas import FailureRecord
from form_validator.strategy import pack_strategy
from form_validator.typing import CheckFn, RuleEntry, RuleMap
from form_validator.validator import Validator, normalize_rule, normalize_rules, validate, validate_find

__all__ = [
    "Validator",
    "validate",
    "validate_find",
    "normalize_rule",
    "normalize_rules",
    "FailureRecord",
    "pack_strategy",
    "required",
    "equal_to",
    "min_length",
    "max_length",
    "range_length",
    "min_value",
    "max_value",
    "value_range",
    "regular",
    "is_price",
    "is_mobile",
    "is_email",
    "is_id_card",
    "parse_float",
    "PATTERNS",
    "get_pattern",
    "CheckFn",
    "RuleEntry",
    "RuleMap",
    "ValidatorConfig",
    "resolve_config",
    "FormValidatorError",
    "RuleError",
    "ConfigError",
    "ValidationError",
]
