"""
流水线结果模型 - 对宿主（CLI/GUI）暴露的结构

对应宿主接口：
- generate_request → GenerateResult
- 保存位置解析 → DestinationChoice
"""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, Field

from .code import ValidationIssue


class DestinationChoice(BaseModel):
    """保存位置选择结果"""
    file_path: Path | None = None
    canceled: bool = False


class GenerateResult(BaseModel):
    """生成结果"""
    success: bool
    errors: list[ValidationIssue] = Field(default_factory=list, description="校验失败明细")
    canceled: bool = False
    file_path: Path | None = None
    error: str | None = Field(None, description="渲染/生成/保存失败信息")

    # 成功时的统计
    code_count: int = 0
    page_count: int | None = None

    @classmethod
    def invalid(cls, errors: list[ValidationIssue]) -> GenerateResult:
        return cls(success=False, errors=errors)

    @classmethod
    def cancelled(cls) -> GenerateResult:
        return cls(success=False, canceled=True)

    @classmethod
    def failed(cls, error: str) -> GenerateResult:
        return cls(success=False, error=error)
