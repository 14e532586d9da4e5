"""
@Author: li
@Email: lijianqiao2906@live.com
@FileName: strategy.py
@DateTime: 2026-10-19
@Docs: Strategy wrapper shared by every rule factory.
所有规则工厂共用的策略包装。
"""

from collections.abc import Callable
from functools import wraps
from typing import Any

from form_validator.typing import CheckFn, FormData

type RawCheck = Callable[[Any, str, FormData], str | None]


def pack_strategy(fn: RawCheck, is_required: bool = False) -> CheckFn:
    """Wrap a raw check into a check function.
    将原始校验函数包装为校验函数。

    Optional fields are skipped while empty: when ``is_required`` is False and
    the value is an empty string (or None), the wrapped check is not called.
    非必填字段为空时跳过校验：``is_required`` 为 False 且值为空字符串（或 None）时，
    不会调用原始校验函数。

    Args:
        fn: Raw check ``(value, key, form_data) -> message | None``.
            原始校验函数 ``(value, key, form_data) -> message | None``。
        is_required: Whether the check also runs on empty values.
            是否在值为空时也执行校验（默认值为 False）。

    Returns:
        CheckFn: Wrapped check function.
            包装后的校验函数。

    Examples:
        >>> check = pack_strategy(lambda v, k, d: None if v == "ok" else f"{k} bad")
        >>> check("", "name") is None
        True
        >>> check("no", "name")
        'name bad'
    """

    @wraps(fn)
    def check(value: Any = "", key: str = "", form_data: FormData | None = None) -> str | None:
        if value is None:
            value = ""
        if not is_required and value == "":
            return None
        return fn(value, key, form_data if form_data is not None else {})

    return check
