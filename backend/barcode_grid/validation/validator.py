"""
编码校验器 - 前导零规则

职责：
1. 拆分原始输入（按行、去首尾空白、丢弃空行）
2. 标记以"0+数字"开头的编码（疑似误输入的前导零）
3. 一次性返回全部问题，不在首个错误处中断

规则说明：
- 仅检查字符串绝对开头：^0\\d
- 单独的 "0"、"0x..."、分隔符后的零（如 M4018-028）均放行
- 行号按非空行计数（1起）

测试要点：
- test_leading_zero_flagged: 前导零被标记
- test_zero_after_delimiter_accepted: 分隔符后的零放行
- test_blank_lines_not_counted: 空行不计入行号
"""

from __future__ import annotations

import re

from ..models import ValidateResult, ValidationIssue

# 仅匹配ASCII数字，避免全角数字等被 \d 命中
LEADING_ZERO_PATTERN = re.compile(r"^0[0-9]")

# 首尾空白，含 str.strip 不处理的 BOM（U+FEFF）
_TRIM_PATTERN = re.compile(r"^[\s\ufeff]+|[\s\ufeff]+$")


def _trim(line: str) -> str:
    return _TRIM_PATTERN.sub("", line)


def split_codes(raw_text: str) -> list[str]:
    """拆分原始输入为编码列表"""
    if not raw_text:
        return []
    # 按 \n 拆分，\r 由 _trim 去除
    lines = (_trim(line) for line in raw_text.split("\n"))
    return [line for line in lines if line]


def validate_codes(codes: list[str]) -> list[ValidationIssue]:
    """校验编码列表，返回全部问题（无问题时为空列表）"""
    issues: list[ValidationIssue] = []
    for index, code in enumerate(codes):
        if LEADING_ZERO_PATTERN.match(code):
            issues.append(
                ValidationIssue(
                    line_number=index + 1,
                    code=code,
                    message=f'Code "{code}" has a leading zero',
                )
            )
    return issues


def validate_text(raw_text: str) -> ValidateResult:
    """拆分并校验原始输入"""
    codes = split_codes(raw_text)
    return ValidateResult(codes=codes, errors=validate_codes(codes))
