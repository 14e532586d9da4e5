"""
@Author: li
@Email: lijianqiao2906@live.com
@FileName: conftest.py
@DateTime: 2026-10-19
@Docs: Shared test fixtures for the form-validator test suite.
测试套件的公共 fixtures。
"""

from typing import Any

import pytest

from form_validator import (
    PATTERNS,
    equal_to,
    is_email,
    is_id_card,
    is_mobile,
    is_price,
    max_length,
    max_value,
    min_length,
    min_value,
    pack_strategy,
    range_length,
    regular,
    required,
    value_range,
)
from form_validator.typing import RuleMap


def _other(val: Any, key: str, form_data: Any) -> str | None:
    if val != "other":
        return f"{key}错误"
    return None


def _pack(val: Any, key: str, form_data: Any) -> str | None:
    if val != "pack":
        return f"{key}错误"
    return None


@pytest.fixture
def demo_rules() -> RuleMap:
    """A rule map covering every factory plus raw and packed custom checks.
    覆盖所有规则工厂以及自定义原始/包装校验的规则映射。
    """
    return {
        "name": [required("请输入姓名"), range_length(2, 5, "rl超出范围")],
        "phone": [required(), is_mobile("手机号码格式错误")],
        "twoPhone": equal_to("phone", "不相等"),
        "age": value_range(1, 120, "超出范围"),
        "min": min_value(3, "min超出范围"),
        "max": max_value(10, "max超出范围"),
        "maxLength": max_length(2, "maxl超出范围"),
        "minLength": min_length(5, "minl超出范围"),
        "email": is_email("邮箱错误"),
        "idCard": is_id_card("id错误"),
        "price": is_price("金额错误"),
        "r": regular(PATTERNS["capital"], "大写"),
        "other": _other,
        "pack": pack_strategy(_pack),
    }


@pytest.fixture
def bad_form() -> dict[str, Any]:
    """Form data failing every demo rule (``other`` is absent).
    使所有示例规则失败的表单数据（缺少 ``other``）。
    """
    return {
        "name": "测",
        "phone": "1367051550",
        "twoPhone": "1367051509",
        "age": "0",
        "min": "2",
        "max": "12",
        "maxLength": "hhhhhhhh",
        "minLength": "lll",
        "email": "111@qq",
        "idCard": "44",
        "price": "sdas",
        "r": "11",
        "pack": "ss",
    }


@pytest.fixture
def good_form() -> dict[str, Any]:
    """Form data passing every demo rule (``pack`` is absent and skipped).
    通过所有示例规则的表单数据（缺少 ``pack``，被跳过）。
    """
    return {
        "name": "测试",
        "phone": "13670515509",
        "twoPhone": "13670515509",
        "age": "18",
        "min": "4",
        "max": "10",
        "maxLength": "hh",
        "minLength": "ll44444",
        "email": "111@qq.com",
        "idCard": "44051019961114041X",
        "price": "10",
        "r": "ASSS",
        "other": "other",
    }
