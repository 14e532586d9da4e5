"""
@Author: li
@Email: lijianqiao2906@live.com
@FileName: config.py
@DateTime: 2026-10-19
@Docs: Validator configuration helpers.
校验器配置助手。

Environment variables / 环境变量:
        - FORM_VALIDATOR_MISSING_VALUE:
            Value used for fields absent from form data (default: empty string).
            表单数据中缺失字段使用的值（默认空字符串）。
        - FORM_VALIDATOR_MAX_ERRORS:
            Maximum number of records collected by ``validate`` (default: unlimited).
            ``validate`` 收集的最大错误数（默认不限制）。

Examples:
        >>> from form_validator.config import resolve_config
        >>> cfg = resolve_config(max_errors=10)
        >>> cfg.max_errors
        10
"""

import os
from dataclasses import dataclass

from form_validator.exceptions import ConfigError


@dataclass(frozen=True, slots=True)
class ValidatorConfig:
    """Validator configuration.

    校验器配置。

    Attributes:
        missing_value: Value looked up for fields absent from form data.
            表单数据中缺失字段的取值。
        max_errors: Maximum records collected in collect-all mode (None for unlimited).
            全量模式下收集的最大记录数（None 表示不限制）。
    """

    missing_value: str = ""
    max_errors: int | None = None


DEFAULT_CONFIG = ValidatorConfig()


def _env_get(*names: str) -> str | None:
    """Get the first non-empty environment variable value.

    获取第一个非空环境变量值。

    Args:
        *names: Candidate environment variable names in priority order.
            候选环境变量名（按优先级顺序）。

    Returns:
        The first non-empty value, or None.
            返回第一个非空值；若都为空则返回 None。
    """
    for n in names:
        v = os.getenv(n)
        if v is not None and v.strip():
            return v.strip()
    return None


def _parse_max_errors(value: int | str | None) -> int | None:
    """
    Validate a max_errors value.
    校验 max_errors 取值。

    Raises:
        ConfigError: When the value is not a positive integer.
            取值不是正整数时抛出 ConfigError。
    """
    if value is None:
        return None
    try:
        parsed = int(value)
    except (TypeError, ValueError) as exc:
        raise ConfigError(
            message=f"max_errors must be an integer: {value} / max_errors 必须是整数：{value}",
            details={"max_errors": value},
            error_code="invalid_max_errors",
        ) from exc
    if parsed < 1:
        raise ConfigError(
            message=f"max_errors must be positive: {value} / max_errors 必须大于 0：{value}",
            details={"max_errors": value},
            error_code="invalid_max_errors",
        )
    return parsed


def resolve_config(
    *,
    missing_value: str | None = None,
    max_errors: int | None = None,
    env_prefix: str = "FORM_VALIDATOR",
) -> ValidatorConfig:
    """Resolve configuration from parameters and environment variables.

    从参数和环境变量解析配置。

    Resolution order / 解析优先级:
        1) function parameters / 函数参数
        2) env: `{env_prefix}_MISSING_VALUE`, `{env_prefix}_MAX_ERRORS`
           环境变量：`{env_prefix}_MISSING_VALUE`、`{env_prefix}_MAX_ERRORS`
        3) defaults / 默认值

    Args:
        missing_value: Value for absent fields.
            缺失字段的取值。
        max_errors: Maximum collected records.
            最大收集记录数。
        env_prefix: Prefix for environment variables.
            环境变量前缀（默认 FORM_VALIDATOR）。

    Returns:
        A ValidatorConfig instance.
            返回 ValidatorConfig 配置实例。

    Raises:
        ConfigError: When max_errors is not a positive integer.
            max_errors 不是正整数时抛出 ConfigError。
    """
    # missing_value is read unstripped / missing_value 不去除空白
    env_missing = os.getenv(f"{env_prefix}_MISSING_VALUE")
    env_max_errors = _env_get(f"{env_prefix}_MAX_ERRORS")
    return ValidatorConfig(
        missing_value=missing_value if missing_value is not None else (env_missing or ""),
        max_errors=_parse_max_errors(max_errors if max_errors is not None else env_max_errors),
    )
