"""
编码校验模块

子模块：
- validator: 输入拆分与前导零校验
"""

from .validator import LEADING_ZERO_PATTERN, split_codes, validate_codes, validate_text

__all__ = [
    "LEADING_ZERO_PATTERN",
    "split_codes",
    "validate_codes",
    "validate_text",
]
