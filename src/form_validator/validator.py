"""
@Author: li
@Email: lijianqiao2906@live.com
@FileName: validator.py
@DateTime: 2026-10-19
@Docs: Validator and rule-map evaluation.
校验器与规则映射求值。

Two evaluation modes share one traversal: field keys in rule-map order, then
each field's checks in sequence order.
两种求值模式共用同一遍历顺序：先按规则映射的字段顺序，再按字段内校验函数的顺序。

- validate_find: fail-fast, returns the first failure or None.
    validate_find：遇错即返回，返回首个失败记录或 None。
- validate: collect-all, returns every failure in encounter order.
    validate：收集全部失败记录，按遇到顺序返回。

Examples:
    >>> from form_validator.rules import value_range
    >>> v = Validator({"age": value_range(1, 120)})
    >>> v.validate_find({"age": "0"}).msg
    'age的值范围应该是1~120'
    >>> v.validate_find({"age": "18"}) is None
    True
"""

import logging
from collections.abc import Iterator, Mapping, Sequence
from itertools import islice
from types import MappingProxyType

from form_validator.config import DEFAULT_CONFIG, ValidatorConfig
from form_validator.exceptions import RuleError, ValidationError
from form_validator.schemas import FailureRecord
from form_validator.typing import CheckFn, FormData, NormalizedRules, RuleEntry, RuleMap

logger = logging.getLogger(__name__)


def normalize_rule(key: str, entry: RuleEntry) -> tuple[CheckFn, ...]:
    """
    Normalize a rule entry into a tuple of check functions.
    将规则项规范化为校验函数元组。

    Args:
        key: Field key (used in error details).
            字段名（用于错误详情）。
        entry: A check function or a sequence of check functions.
            单个校验函数或校验函数序列。

    Returns:
        tuple[CheckFn, ...]: Check functions in evaluation order.
            按求值顺序排列的校验函数。

    Raises:
        RuleError: When the entry is not callable or contains non-callables.
            规则项不可调用或包含不可调用对象时抛出 RuleError。
    """
    if callable(entry):
        return (entry,)
    if isinstance(entry, Sequence) and not isinstance(entry, (str, bytes)):
        checks = tuple(entry)
        for index, fn in enumerate(checks):
            if not callable(fn):
                raise RuleError(
                    message=f"Rule {key}[{index}] is not callable / 规则 {key}[{index}] 不可调用",
                    details={"key": key, "index": index, "type": type(fn).__name__},
                    error_code="invalid_rule",
                )
        return checks
    raise RuleError(
        message=f"Rule {key} must be a check function or a sequence of them / 规则 {key} 必须是校验函数或校验函数序列",
        details={"key": key, "type": type(entry).__name__},
        error_code="invalid_rule",
    )


def normalize_rules(rules: RuleMap) -> NormalizedRules:
    """
    Normalize a rule map, preserving key order.
    规范化规则映射，保持字段顺序。

    Args:
        rules: Rule map.
            规则映射。

    Returns:
        NormalizedRules: Mapping from field key to check-function tuple.
            字段名到校验函数元组的映射。
    """
    return {key: normalize_rule(key, entry) for key, entry in rules.items()}


def iter_failures(form_data: FormData, rules: NormalizedRules, config: ValidatorConfig) -> Iterator[FailureRecord]:
    """Lazily yield failures in encounter order / 按遇到顺序惰性产出失败记录。"""
    for key, checks in rules.items():
        value = form_data.get(key, config.missing_value)
        for fn in checks:
            msg = fn(value, key, form_data)
            if msg:
                yield FailureRecord(key=key, val=value, msg=msg)


def validate_find(
    form_data: FormData | None = None,
    rules: RuleMap | None = None,
    *,
    config: ValidatorConfig | None = None,
) -> FailureRecord | None:
    """
    Validate form data and return the first failure.
    校验表单数据，检验到错误立即返回。

    Args:
        form_data: Form data.
            表单数据。
        rules: Rule map.
            规则映射。
        config: Validator configuration.
            校验器配置（可选）。

    Returns:
        FailureRecord | None: First failure, or None when every check passes.
            首个失败记录；全部通过时返回 None。
    """
    return _find(form_data or {}, normalize_rules(rules or {}), config or DEFAULT_CONFIG)


def validate(
    form_data: FormData | None = None,
    rules: RuleMap | None = None,
    *,
    config: ValidatorConfig | None = None,
) -> list[FailureRecord]:
    """
    Validate form data and collect every failure.
    校验表单数据并收集全部失败记录。

    Args:
        form_data: Form data.
            表单数据。
        rules: Rule map.
            规则映射。
        config: Validator configuration.
            校验器配置（可选）。

    Returns:
        list[FailureRecord]: Failures in encounter order (possibly empty).
            按遇到顺序排列的失败记录（可能为空）。
    """
    return _collect(form_data or {}, normalize_rules(rules or {}), config or DEFAULT_CONFIG)


def _find(form_data: FormData, rules: NormalizedRules, config: ValidatorConfig) -> FailureRecord | None:
    failure = next(iter_failures(form_data, rules, config), None)
    if failure is not None:
        logger.debug("Validation failed on field %s", failure.key)
    return failure


def _collect(form_data: FormData, rules: NormalizedRules, config: ValidatorConfig) -> list[FailureRecord]:
    errors = list(islice(iter_failures(form_data, rules, config), config.max_errors))
    if errors:
        logger.debug("Validation collected %d failure(s) over %d field(s)", len(errors), len(rules))
    return errors


class Validator:
    """
    Form validator holding a rule map.
    持有规则映射的表单校验器。

    Attributes:
        config: Validator configuration.
        config: 校验器配置。
    """

    def __init__(self, rules: RuleMap | None = None, *, config: ValidatorConfig | None = None) -> None:
        """
        Initialize the validator.
        初始化校验器。

        Args:
            rules: Initial rule map.
                初始规则映射（可选）。
            config: Validator configuration.
                校验器配置（可选）。

        Raises:
            RuleError: When a rule entry is invalid.
                规则项非法时抛出 RuleError。
        """
        self._rules: NormalizedRules = {}
        self.config = config or DEFAULT_CONFIG
        self.add_rules(rules or {})

    @property
    def rules(self) -> Mapping[str, tuple[CheckFn, ...]]:
        """Read-only view of the normalized rules / 规范化规则的只读视图。"""
        return MappingProxyType(self._rules)

    def add_rules(self, rules: RuleMap | None = None) -> None:
        """
        Merge rules; a key already present is overwritten.
        合并规则，已存在的字段会被覆盖。

        Args:
            rules: Rule map to merge.
                要合并的规则映射。

        Raises:
            RuleError: When a rule entry is invalid.
                规则项非法时抛出 RuleError。
        """
        normalized = normalize_rules(rules or {})
        self._rules.update(normalized)
        logger.debug("Added rules for %d field(s), %d total", len(normalized), len(self._rules))

    def validate_find(self, form_data: FormData | None = None) -> FailureRecord | None:
        """
        Validate and return the first failure.
        校验表单，检验到错误立即返回。

        Returns:
            FailureRecord | None: First failure, or None.
                首个失败记录，或 None。
        """
        return _find(form_data or {}, self._rules, self.config)

    def validate(self, form_data: FormData | None = None) -> list[FailureRecord]:
        """
        Validate and collect every failure.
        校验表单并收集全部失败记录。

        Returns:
            list[FailureRecord]: Failures in encounter order.
                按遇到顺序排列的失败记录。
        """
        return _collect(form_data or {}, self._rules, self.config)

    def check(self, form_data: FormData | None = None) -> None:
        """
        Validate and raise when anything fails.
        校验表单，存在失败时抛出异常。

        Raises:
            ValidationError: Carries the failure records in ``details``.
                ``details`` 中携带失败记录。
        """
        errors = self.validate(form_data)
        if errors:
            raise ValidationError(details=[e.model_dump() for e in errors])

    @staticmethod
    def validate_rules(
        form_data: FormData | None = None,
        rules: RuleMap | None = None,
        *,
        config: ValidatorConfig | None = None,
    ) -> list[FailureRecord]:
        """Static collect-all entry point / 静态全量校验入口。"""
        return validate(form_data, rules, config=config)

    @staticmethod
    def find_in_rules(
        form_data: FormData | None = None,
        rules: RuleMap | None = None,
        *,
        config: ValidatorConfig | None = None,
    ) -> FailureRecord | None:
        """Static fail-fast entry point / 静态遇错即返回入口。"""
        return validate_find(form_data, rules, config=config)
