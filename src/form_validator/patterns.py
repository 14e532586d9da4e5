"""
@Author: li
@Email: lijianqiao2906@live.com
@FileName: patterns.py
@DateTime: 2026-10-19
@Docs: Named pattern table shared by regex rules.
正则规则共用的命名模式表。

Patterns are compiled once at import time and exposed through a read-only
mapping. Matching uses ``Pattern.search``; each pattern carries its own anchors.
End anchors are ``\\Z`` so a trailing newline never matches.
模式在导入时编译一次，并通过只读映射对外暴露。匹配使用 ``Pattern.search``，
锚点由各模式自身决定。结尾锚点使用 ``\\Z``，末尾换行不会被匹配。
"""

import re
from collections.abc import Mapping
from types import MappingProxyType

from form_validator.exceptions import RuleError

# National ID: 18-digit form (19xx/20xx, leap-year aware) or 15-digit legacy form,
# both ending in a digit or checksum letter X.
# 身份证：18 位（19xx/20xx，含闰年判断）或 15 位旧格式，末位为数字或校验字母 X。
ID_CARD_REGEX = (
    r"^\d{6}("
    r"(((((19|20)\d{2})(0[13-9]|1[012])(0[1-9]|[12]\d|30))"
    r"|(((19|20)\d{2})(0[13578]|1[02])31)"
    r"|((19|20)\d{2})02(0[1-9]|1\d|2[0-8])"
    r"|((((19|20)([13579][26]|[2468][048]|0[48]))|(2000))0229))\d{3})"
    r"|((((\d{2})(0[13-9]|1[012])(0[1-9]|[12]\d|30))"
    r"|((\d{2})(0[13578]|1[02])31)"
    r"|((\d{2})02(0[1-9]|1\d|2[0-8]))"
    r"|(([13579][26]|[2468][048]|0[048])0229))\d{2})"
    r")(\d|X|x)\Z"
)

PASSPORT_REGEX = (
    r"(^[EeKkGgDdSsPpHh]\d{8}\Z)"
    r"|(^(([Ee][a-fA-F])|([DdSsPp][Ee])|([Kk][Jj])|([Mm][Aa])|(1[45]))\d{7}\Z)"
)

EMAIL_REGEX = (
    r'^(([^<>()\[\]\\.,;:\s@"]+(\.[^<>()\[\]\\.,;:\s@"]+)*)|(".+"))'
    r"@((\[[0-9]{1,3}\.[0-9]{1,3}\.[0-9]{1,3}\.[0-9]{1,3}\])"
    r"|(([a-zA-Z\-0-9]+\.)+[a-zA-Z]{2,}))\Z"
)

_PATTERNS: dict[str, re.Pattern[str]] = {
    # 大写字母
    "capital": re.compile(r"^[A-Z]+\Z"),
    # 身份证
    "id_card": re.compile(ID_CARD_REGEX, re.ASCII),
    # 护照
    "passport": re.compile(PASSPORT_REGEX, re.ASCII),
    # 港澳通行证
    "passport_macao": re.compile(r"^[HMhm]{1}([0-9]{10}|[0-9]{8})\Z"),
    # 台湾通行证
    "passport_taiwan": re.compile(r"^\d{8}|^[a-zA-Z0-9]{10}|^\d{18}\Z", re.ASCII),
    # 军官证
    "certificate": re.compile(r"^[一-龥](字第)([0-9a-zA-Z]{4,8})(号?)\Z"),
    # 金额
    "price": re.compile(r"^-?\d{1,3}(,\d{3})*(\.\d{1,2})?\Z", re.ASCII),
    # 手机号
    "mobile": re.compile(r"^(?:(?:\+|00)86)?1[3-9]\d{9}\Z", re.ASCII),
    # 邮箱
    "email": re.compile(EMAIL_REGEX),
}

PATTERNS: Mapping[str, re.Pattern[str]] = MappingProxyType(_PATTERNS)


def get_pattern(name: str) -> re.Pattern[str]:
    """Return a named pattern.
    返回命名模式。

    Args:
        name: Pattern name, e.g. ``mobile``.
            模式名称，例如 ``mobile``。

    Returns:
        re.Pattern[str]: Compiled pattern.
            已编译的正则模式。

    Raises:
        RuleError: When the name is unknown.
            名称未知时抛出 RuleError。
    """
    try:
        return PATTERNS[name]
    except KeyError as exc:
        raise RuleError(
            message=f"Unknown pattern: {name} / 未知的正则模式：{name}",
            details={"name": name, "available": sorted(PATTERNS)},
            error_code="unknown_pattern",
        ) from exc
