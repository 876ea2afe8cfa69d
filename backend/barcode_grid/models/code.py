"""
编码校验模型 - 校验问题与校验结果
"""

from __future__ import annotations

from pydantic import BaseModel, Field


class ValidationIssue(BaseModel):
    """单条校验问题"""
    line_number: int = Field(..., ge=1, description="行号（1起，仅计非空行）")
    code: str = Field(..., description="出错的编码")
    message: str = Field(..., description="可读说明")

    model_config = {"frozen": True}


class ValidateResult(BaseModel):
    """校验结果"""
    codes: list[str] = Field(default_factory=list, description="清洗后的编码")
    errors: list[ValidationIssue] = Field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return not self.errors
