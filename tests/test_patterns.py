"""
@Author: li
@Email: lijianqiao2906@live.com
@FileName: test_patterns.py
@DateTime: 2026-10-19
@Docs: Tests for patterns.py module.
patterns.py 模块测试。
"""

import pytest

from form_validator.exceptions import RuleError
from form_validator.patterns import PATTERNS, get_pattern


def _ok(name: str, value: str) -> bool:
    return PATTERNS[name].search(value) is not None


class TestPatternTable:
    """Tests for the pattern table itself.
    模式表本身的测试。
    """

    def test_expected_names(self) -> None:
        assert set(PATTERNS) == {
            "capital",
            "id_card",
            "passport",
            "passport_macao",
            "passport_taiwan",
            "certificate",
            "price",
            "mobile",
            "email",
        }

    def test_read_only(self) -> None:
        """The table cannot be mutated / 模式表不可修改。"""
        with pytest.raises(TypeError):
            PATTERNS["new"] = PATTERNS["capital"]  # type: ignore[index]

    def test_get_pattern_known(self) -> None:
        assert get_pattern("mobile") is PATTERNS["mobile"]

    def test_get_pattern_unknown_raises(self) -> None:
        with pytest.raises(RuleError) as exc_info:
            get_pattern("nope")
        assert exc_info.value.error_code == "unknown_pattern"
        assert "mobile" in exc_info.value.details["available"]


VALID_SAMPLES = [
    ("capital", "ASSS"),
    ("id_card", "44051019961114041X"),
    ("passport", "E12345678"),
    ("passport_macao", "H1234567890"),
    ("passport_taiwan", "123456789012345678"),
    ("certificate", "南字第12345号"),
    ("price", "10"),
    ("mobile", "13670515509"),
    ("email", "111@qq.com"),
]

END_ANCHORED = [s for s in VALID_SAMPLES if s[0] != "passport_taiwan"]


class TestAnchoring:
    """Tests that every pattern matches the whole value.
    每个模式都必须匹配完整取值的测试。
    """

    @pytest.mark.parametrize(("name", "value"), VALID_SAMPLES)
    def test_sample_is_valid(self, name: str, value: str) -> None:
        assert _ok(name, value)

    @pytest.mark.parametrize(("name", "value"), END_ANCHORED)
    def test_trailing_newline_rejected(self, name: str, value: str) -> None:
        """A trailing newline never satisfies the end anchor / 末尾换行不满足结尾锚点。"""
        assert not _ok(name, value + "\n")

    @pytest.mark.parametrize(("name", "value"), END_ANCHORED)
    @pytest.mark.parametrize("suffix", ["!", " ", "\r\n", "\n\n"])
    def test_trailing_junk_rejected(self, name: str, value: str, suffix: str) -> None:
        assert not _ok(name, value + suffix)

    @pytest.mark.parametrize(("name", "value"), VALID_SAMPLES)
    @pytest.mark.parametrize("prefix", [" ", "\n", "<"])
    def test_leading_junk_rejected(self, name: str, value: str, prefix: str) -> None:
        assert not _ok(name, prefix + value)

    def test_taiwan_short_forms_are_prefix_anchored_only(self) -> None:
        """Only the 18-digit Taiwan form is end-anchored / 台湾通行证仅 18 位形式带结尾锚点。"""
        assert _ok("passport_taiwan", "12345678-extra")
        assert not _ok("passport_taiwan", "x12345678")


class TestIdCard:
    """Tests for the national ID pattern.
    身份证模式测试。
    """

    def test_valid_18_digits(self) -> None:
        assert _ok("id_card", "44051019961114041X")

    def test_lowercase_checksum_letter(self) -> None:
        assert _ok("id_card", "44051019961114041x")

    def test_valid_15_digits(self) -> None:
        assert _ok("id_card", "440510961114041")

    def test_leap_day_2000(self) -> None:
        """2000-02-29 is a valid date / 2000-02-29 是合法日期。"""
        assert _ok("id_card", "11010520000229123X")

    def test_leap_day_non_leap_year(self) -> None:
        """1999-02-29 does not exist / 1999-02-29 不存在。"""
        assert not _ok("id_card", "11010519990229123X")

    def test_day_31_in_short_month(self) -> None:
        assert not _ok("id_card", "110105199904311234")

    def test_century_outside_19_20(self) -> None:
        assert not _ok("id_card", "110105180001011234")

    def test_too_short(self) -> None:
        assert not _ok("id_card", "44")


class TestMobile:
    """Tests for the mobile pattern.
    手机号模式测试。
    """

    @pytest.mark.parametrize("value", ["13670515509", "+8613670515509", "008613670515509", "19912345678"])
    def test_valid(self, value: str) -> None:
        assert _ok("mobile", value)

    @pytest.mark.parametrize("value", ["1367051550", "12670515509", "136705155090", "+8513670515509"])
    def test_invalid(self, value: str) -> None:
        assert not _ok("mobile", value)


class TestPrice:
    """Tests for the monetary amount pattern.
    金额模式测试。
    """

    @pytest.mark.parametrize("value", ["10", "-1,234.56", "999", "1,000,000.5", "0.01"])
    def test_valid(self, value: str) -> None:
        assert _ok("price", value)

    @pytest.mark.parametrize("value", ["sdas", "1234", "1,23", "12.345", "--1"])
    def test_invalid(self, value: str) -> None:
        assert not _ok("price", value)


class TestEmail:
    """Tests for the email pattern.
    邮箱模式测试。
    """

    @pytest.mark.parametrize("value", ["111@qq.com", "a.b@example.co.uk", '"quoted name"@example.com', "x@[127.0.0.1]"])
    def test_valid(self, value: str) -> None:
        assert _ok("email", value)

    @pytest.mark.parametrize("value", ["111@qq", "no-at-sign", "a@b.c", "a b@example.com"])
    def test_invalid(self, value: str) -> None:
        assert not _ok("email", value)


class TestTravelDocuments:
    """Tests for passport, permit and certificate patterns.
    护照、通行证与军官证模式测试。
    """

    @pytest.mark.parametrize("value", ["E12345678", "EA1234567", "DE1234567", "141234567"])
    def test_passport_valid(self, value: str) -> None:
        assert _ok("passport", value)

    @pytest.mark.parametrize("value", ["A12345678", "E1234567", "EZ1234567"])
    def test_passport_invalid(self, value: str) -> None:
        assert not _ok("passport", value)

    @pytest.mark.parametrize("value", ["H1234567890", "M12345678", "h12345678"])
    def test_passport_macao_valid(self, value: str) -> None:
        assert _ok("passport_macao", value)

    def test_passport_macao_invalid(self) -> None:
        assert not _ok("passport_macao", "H123456789")

    @pytest.mark.parametrize("value", ["12345678", "ab12345678", "123456789012345678"])
    def test_passport_taiwan_valid(self, value: str) -> None:
        assert _ok("passport_taiwan", value)

    def test_passport_taiwan_invalid(self) -> None:
        assert not _ok("passport_taiwan", "abc")

    def test_certificate_valid(self) -> None:
        assert _ok("certificate", "南字第12345号")
        assert _ok("certificate", "南字第ab12")

    def test_certificate_invalid(self) -> None:
        assert not _ok("certificate", "南字第123号")
        assert not _ok("certificate", "A字第12345号")


class TestCapital:
    """Tests for the capital letters pattern.
    大写字母模式测试。
    """

    def test_valid(self) -> None:
        assert _ok("capital", "ASSS")

    def test_invalid(self) -> None:
        assert not _ok("capital", "AbC")
        assert not _ok("capital", "11")
