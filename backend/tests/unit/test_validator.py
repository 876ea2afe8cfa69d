"""
编码校验单元测试
"""

import pytest

from barcode_grid.validation import split_codes, validate_codes, validate_text


class TestSplitCodes:
    """输入拆分测试"""

    def test_trim_and_drop_blank(self):
        """去首尾空白并丢弃空行"""
        raw = "  M4018-28 \n\n   \nABC-001\n"
        assert split_codes(raw) == ["M4018-28", "ABC-001"]

    def test_crlf(self):
        """Windows换行"""
        assert split_codes("A-1\r\nB-2\r\n") == ["A-1", "B-2"]

    def test_empty(self):
        assert split_codes("") == []
        assert split_codes("\n \n\t\n") == []

    def test_bom_stripped(self):
        """记事本写入的BOM不属于编码"""
        assert split_codes("\ufeffA-1\nB-2\ufeff\n \ufeff \n") == ["A-1", "B-2"]

    def test_bom_does_not_hide_leading_zero(self):
        """BOM开头的文件，首行前导零仍按第1行报告"""
        result = validate_text("\ufeff04018-28\nM4018-29")
        assert [(e.line_number, e.code) for e in result.errors] == [(1, "04018-28")]


class TestValidateCodes:
    """前导零规则测试"""

    def test_scenario_leading_zero(self):
        """04018-28 被标记，M4018-29 放行"""
        errors = validate_codes(["04018-28", "M4018-29"])
        assert len(errors) == 1
        assert errors[0].line_number == 1
        assert errors[0].code == "04018-28"
        assert "04018-28" in errors[0].message
        assert "leading zero" in errors[0].message

    def test_scenario_zero_after_delimiter(self):
        """分隔符后的零全部放行"""
        assert validate_codes(["M4018-028", "ABC-001", "XYZ-0099"]) == []

    def test_empty_input(self):
        assert validate_codes([]) == []

    @pytest.mark.parametrize("code", ["0", "0x12", "0-12", "O123", "10", "A0123", " 0"])
    def test_accepted(self, code: str):
        """非"0+数字"开头的编码均放行"""
        assert validate_codes([code]) == []

    @pytest.mark.parametrize("code", ["00", "01", "0123456", "09-ABC"])
    def test_rejected(self, code: str):
        errors = validate_codes([code])
        assert [e.code for e in errors] == [code]

    def test_non_ascii_digit_not_flagged(self):
        """仅ASCII数字构成前导零"""
        assert validate_codes(["0１２"]) == []

    def test_all_errors_reported(self):
        """全部问题一次返回，行号1起"""
        codes = ["0123", "OK-1", "0456", "OK-2", "07"]
        errors = validate_codes(codes)
        assert [(e.line_number, e.code) for e in errors] == [(1, "0123"), (3, "0456"), (5, "07")]

    def test_idempotent(self):
        codes = ["04018-28", "M4018-29", "0999"]
        assert validate_codes(codes) == validate_codes(codes)


class TestValidateText:
    """拆分+校验测试"""

    def test_blank_lines_not_counted(self):
        """行号只计非空行"""
        result = validate_text("M4018-29\n\n   \n04018-28\n")
        assert result.codes == ["M4018-29", "04018-28"]
        assert [e.line_number for e in result.errors] == [2]
        assert not result.is_valid

    def test_valid_text(self):
        result = validate_text("PROD-001\nPROD-002")
        assert result.is_valid
        assert result.codes == ["PROD-001", "PROD-002"]
