"""
数据模型层 - 定义系统核心数据结构

所有模块通过这些模型交互，实现解耦：
- ValidationIssue: 单条校验问题（行号+编码+说明）
- BarcodeAsset: 单个条码图像资源
- FormatProfile: 输出格式的几何/样式配置
- Placement/LayoutPlan: 排版方案
- GenerateResult: 流水线对外结果
"""

from .asset import BarcodeAsset
from .code import ValidateResult, ValidationIssue
from .layout import LayoutPlan, PlaceholderCell, Placement
from .profile import FormatProfile, OutputFormat, PageMargins
from .result import DestinationChoice, GenerateResult

__all__ = [
    "ValidationIssue",
    "ValidateResult",
    "BarcodeAsset",
    "OutputFormat",
    "PageMargins",
    "FormatProfile",
    "Placement",
    "PlaceholderCell",
    "LayoutPlan",
    "DestinationChoice",
    "GenerateResult",
]
