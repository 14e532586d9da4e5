"""
@Author: li
@Email: lijianqiao2906@live.com
@FileName: rules.py
@DateTime: 2026-10-19
@Docs: Rule factories producing check functions.
生成校验函数的规则工厂。

Every factory returns a check function built with ``pack_strategy``. Only
``required`` runs on empty values; all other rules skip empty fields.
每个工厂都通过 ``pack_strategy`` 生成校验函数。只有 ``required`` 会在空值时执行，
其余规则在字段为空时跳过。

Messages default to Chinese templates filled with the field key and rule
parameters; pass ``msg`` to override.
默认提示为中文模板，填充字段名与规则参数；传入 ``msg`` 可覆盖。

Examples:
    >>> from form_validator.rules import range_length, required
    >>> rules = {"name": [required("请输入姓名"), range_length(2, 5)]}
    >>> rules["name"][0]("", "name", {})
    '请输入姓名'
"""

import math
import re
from typing import Any

from form_validator.patterns import PATTERNS
from form_validator.strategy import pack_strategy
from form_validator.typing import CheckFn, FormData

_FLOAT_PREFIX = re.compile(r"[+-]?(?:Infinity|(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)", re.ASCII)

# WhiteSpace and LineTerminator code points of String.prototype.trim / JS trim 的空白字符集
_JS_WHITESPACE = (
    "\t\n\v\f\r \u00a0\u1680"
    "\u2000\u2001\u2002\u2003\u2004\u2005\u2006\u2007\u2008\u2009\u200a"
    "\u2028\u2029\u202f\u205f\u3000\ufeff"
)


def parse_float(value: Any) -> float:
    """Parse a leading number the way JavaScript ``parseFloat`` does.
    按 JavaScript ``parseFloat`` 的方式解析前导数字。

    Leading whitespace is skipped and the longest numeric prefix is parsed, so
    ``"12abc"`` gives 12.0. Input without a numeric prefix gives NaN.
    跳过前导空白并解析最长的数字前缀，例如 ``"12abc"`` 得到 12.0；没有数字前缀时返回 NaN。

    Args:
        value: Raw value.
            原始值。

    Returns:
        float: Parsed number or NaN.
            解析结果或 NaN。
    """
    if isinstance(value, bool):
        return math.nan
    if isinstance(value, (int, float)):
        return float(value)
    m = _FLOAT_PREFIX.match(str(value).lstrip(_JS_WHITESPACE))
    if m is None:
        return math.nan
    text = m.group(0)
    if text.endswith("Infinity"):
        return -math.inf if text.startswith("-") else math.inf
    return float(text)


def text_length(value: Any) -> int:
    """Length of ``str(value)`` in UTF-16 code units, as JavaScript ``.length`` counts it.
    按 JavaScript ``.length`` 的方式计算 ``str(value)`` 的 UTF-16 码元长度。

    Characters outside the BMP (e.g. emoji) count as 2.
    BMP 之外的字符（如表情符号）计为 2。
    """
    return len(str(value).encode("utf-16-le")) // 2


def _fmt(value: Any) -> str:
    """Render a rule parameter for messages (``1`` rather than ``1.0``).
    渲染提示中的规则参数（显示 ``1`` 而非 ``1.0``）。
    """
    if isinstance(value, float):
        if math.isnan(value):
            return "NaN"
        if math.isinf(value):
            return "Infinity" if value > 0 else "-Infinity"
        if value.is_integer():
            return str(int(value))
    return str(value)


def _out_of_range(number: float, low: float | None, high: float | None, strict: bool) -> bool:
    if math.isnan(number):
        return strict
    return (low is not None and number < low) or (high is not None and number > high)


def regular(regex: re.Pattern[str] | str, msg: str | None = None) -> CheckFn:
    """Regex rule.
    正则校验。

    Args:
        regex: Compiled pattern or pattern string; matched with ``search``.
            已编译的正则或正则字符串，使用 ``search`` 匹配。
        msg: Message override.
            提示信息（可选）。

    Returns:
        CheckFn: Check function.
            校验函数。
    """
    pattern = re.compile(regex) if isinstance(regex, str) else regex

    def check(val: Any, key: str, form_data: FormData) -> str | None:
        if pattern.search(str(val)) is None:
            return msg or f"{key}验证不通过"
        return None

    return pack_strategy(check)


def required(msg: str | None = None) -> CheckFn:
    """Required rule; the only rule that runs on empty values.
    必填校验，唯一会在空值时执行的规则。

    Whitespace is trimmed with the JavaScript ``trim`` character set.
    按 JavaScript ``trim`` 的空白字符集去除首尾空白。

    Args:
        msg: Message override.
            提示信息（可选）。

    Returns:
        CheckFn: Check function.
            校验函数。
    """

    def check(val: Any, key: str, form_data: FormData) -> str | None:
        if str(val).strip(_JS_WHITESPACE) == "":
            return msg or f"{key}的值不能为空"
        return None

    return pack_strategy(check, True)


def equal_to(to_key: str = "", msg: str | None = None) -> CheckFn:
    """Equality rule against another field.
    与另一个字段的相等校验。

    An empty value skips the check regardless of the other field.
    值为空时跳过校验，与另一个字段的值无关。

    Args:
        to_key: The other form key.
            表单中另一个字段名。
        msg: Message override.
            提示信息（可选）。

    Returns:
        CheckFn: Check function.
            校验函数。
    """

    def check(val: Any, key: str, form_data: FormData) -> str | None:
        if val != form_data.get(to_key):
            return msg or f"{key}的值不等于{to_key}的值"
        return None

    return pack_strategy(check)


def min_length(length: int, msg: str | None = None) -> CheckFn:
    """Minimum string length.
    字符串最小长度。

    Args:
        length: Minimum length.
            最小长度。
        msg: Message override.
            提示信息（可选）。

    Returns:
        CheckFn: Check function.
            校验函数。
    """

    def check(val: Any, key: str, form_data: FormData) -> str | None:
        if text_length(val) < length:
            return msg or f"{key}的值长度不能小于{_fmt(length)}"
        return None

    return pack_strategy(check)


def max_length(length: int, msg: str | None = None) -> CheckFn:
    """Maximum string length.
    字符串最大长度。

    Args:
        length: Maximum length.
            最大长度。
        msg: Message override.
            提示信息（可选）。

    Returns:
        CheckFn: Check function.
            校验函数。
    """

    def check(val: Any, key: str, form_data: FormData) -> str | None:
        if text_length(val) > length:
            return msg or f"{key}的值长度不能超过{_fmt(length)}"
        return None

    return pack_strategy(check)


def range_length(min: int, max: int, msg: str | None = None) -> CheckFn:
    """String length range (inclusive).
    字符串长度范围（含边界）。

    Args:
        min: Minimum length.
            最小长度。
        max: Maximum length.
            最大长度。
        msg: Message override.
            提示信息（可选）。

    Returns:
        CheckFn: Check function.
            校验函数。
    """

    def check(val: Any, key: str, form_data: FormData) -> str | None:
        size = text_length(val)
        if size > max or size < min:
            return msg or f"{key}的值长度范围应该是{_fmt(min)}~{_fmt(max)}"
        return None

    return pack_strategy(check)


def min_value(m: float, msg: str | None = None, *, strict: bool = False) -> CheckFn:
    """Minimum numeric value.
    最小值限制。

    Non-numeric input parses to NaN and passes unless ``strict`` is True.
    非数字输入解析为 NaN，默认视为通过；``strict`` 为 True 时判定为失败。

    Args:
        m: Minimum value.
            最小值。
        msg: Message override.
            提示信息（可选）。
        strict: Fail on non-numeric input.
            非数字输入是否判定失败（默认值为 False）。

    Returns:
        CheckFn: Check function.
            校验函数。
    """

    def check(val: Any, key: str, form_data: FormData) -> str | None:
        if _out_of_range(parse_float(val), m, None, strict):
            return msg or f"{key}的值不能小于{_fmt(m)}"
        return None

    return pack_strategy(check)


def max_value(m: float, msg: str | None = None, *, strict: bool = False) -> CheckFn:
    """Maximum numeric value.
    最大值限制。

    Args:
        m: Maximum value.
            最大值。
        msg: Message override.
            提示信息（可选）。
        strict: Fail on non-numeric input.
            非数字输入是否判定失败（默认值为 False）。

    Returns:
        CheckFn: Check function.
            校验函数。
    """

    def check(val: Any, key: str, form_data: FormData) -> str | None:
        if _out_of_range(parse_float(val), None, m, strict):
            return msg or f"{key}的值不能超过{_fmt(m)}"
        return None

    return pack_strategy(check)


def value_range(min: float, max: float, msg: str | None = None, *, strict: bool = False) -> CheckFn:
    """Numeric range (inclusive).
    数值范围（含边界）。

    Args:
        min: Minimum value.
            最小值。
        max: Maximum value.
            最大值。
        msg: Message override.
            提示信息（可选）。
        strict: Fail on non-numeric input.
            非数字输入是否判定失败（默认值为 False）。

    Returns:
        CheckFn: Check function.
            校验函数。
    """

    def check(val: Any, key: str, form_data: FormData) -> str | None:
        if _out_of_range(parse_float(val), min, max, strict):
            return msg or f"{key}的值范围应该是{_fmt(min)}~{_fmt(max)}"
        return None

    return pack_strategy(check)


def is_price(msg: str | None = None) -> CheckFn:
    """Monetary amount rule / 金额判断。"""
    return regular(PATTERNS["price"], msg)


def is_mobile(msg: str | None = None) -> CheckFn:
    """Mobile number rule / 手机号码判断。"""
    return regular(PATTERNS["mobile"], msg)


def is_email(msg: str | None = None) -> CheckFn:
    """Email rule / 邮箱判断。"""
    return regular(PATTERNS["email"], msg)


def is_id_card(msg: str | None = None) -> CheckFn:
    """National ID rule / 身份证判断。"""
    return regular(PATTERNS["id_card"], msg)
