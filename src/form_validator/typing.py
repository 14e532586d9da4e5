"""
@Author: li
@Email: lijianqiao2906@live.com
@FileName: typing.py
@DateTime: 2026-10-19
@Docs: Shared protocols and types for form validation.
表单校验共享协议与类型。
"""

from collections.abc import Mapping, Sequence
from typing import Any, Protocol

type FormData = Mapping[str, Any]


class CheckFn(Protocol):
    """
    Check function protocol.
    校验函数协议。

    Args:
        value: Field value.
        value: 字段值。
        key: Field key.
        key: 字段名。
        form_data: Whole form data.
        form_data: 完整表单数据。

    Returns:
        str | None: Failure message, or None when the value passes.
        str | None: 失败提示；通过时返回 None。
    """

    def __call__(self, value: Any, key: str, form_data: FormData, /) -> str | None: ...


type RuleEntry = CheckFn | Sequence[CheckFn]
type RuleMap = Mapping[str, RuleEntry]
type NormalizedRules = dict[str, tuple[CheckFn, ...]]
