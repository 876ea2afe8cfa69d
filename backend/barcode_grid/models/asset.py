"""
条码资源模型 - 渲染结果，排版前的最小单元

生命周期：每次生成请求新建，文档输出后即丢弃
"""

from __future__ import annotations

from pydantic import BaseModel, Field


class BarcodeAsset(BaseModel):
    """单个条码图像"""
    code: str = Field(..., description="编码文本（同时作为标签）")
    image_bytes: bytes = Field(..., repr=False, description="PNG字节")
    intrinsic_width: int = Field(..., gt=0, description="像素宽")
    intrinsic_height: int = Field(..., gt=0, description="像素高")

    model_config = {"frozen": True}

    @property
    def aspect_ratio(self) -> float:
        return self.intrinsic_width / self.intrinsic_height
