"""
格式配置模型 - 三种输出格式的几何与样式

对应 config/format_profiles.yaml 的 profiles 节点。
所有长度均为目标格式的原生单位（Word: twip, Excel: px, PDF: pt）。
"""

from __future__ import annotations

import math
from enum import Enum
from typing import Literal

from pydantic import BaseModel, Field, model_validator


class OutputFormat(str, Enum):
    """输出格式枚举"""
    DOCX = "docx"
    PDF = "pdf"
    XLSX = "xlsx"

    @property
    def extension(self) -> str:
        return self.value

    @property
    def label(self) -> str:
        return _FORMAT_LABELS[self]


_FORMAT_LABELS = {
    OutputFormat.DOCX: "Word (.docx)",
    OutputFormat.PDF: "PDF (.pdf)",
    OutputFormat.XLSX: "Excel (.xlsx)",
}


class PageMargins(BaseModel):
    """页边距"""
    top: float = Field(0, ge=0)
    right: float = Field(0, ge=0)
    bottom: float = Field(0, ge=0)
    left: float = Field(0, ge=0)


class FormatProfile(BaseModel):
    """输出格式配置"""
    name: OutputFormat
    description: str = ""
    unit: str = Field(..., description="原生单位(twip/px/pt)")

    # 排版行为
    paginated: bool = Field(False, description="是否由排版引擎分页")
    fill_short_row: bool = Field(False, description="末行不足时是否补占位单元格")
    center_grid: bool = Field(False, description="整个网格在版心内水平居中")

    # 网格几何
    columns_per_row: int = Field(7, ge=1)
    cell_width: float | None = Field(None, gt=0, description="为空时按版心宽/列数派生")
    row_height: float = Field(..., gt=0)
    image_width: float = Field(..., gt=0)
    image_height: float = Field(..., gt=0)
    cell_padding: float = Field(0, ge=0, description="图像距单元格顶部")

    # 标签
    label_gap: float = Field(0, ge=0, description="图像与标签的间距")
    label_height: float = Field(0, ge=0)
    label_font: str = "Arial"
    label_font_size: float = Field(7, gt=0, description="pt")

    # 页面
    margins: PageMargins = Field(default_factory=PageMargins)
    page_width: float | None = Field(None, gt=0)
    page_height: float | None = Field(None, gt=0)

    # 样式（所有格式均无可见边框）
    border: Literal["none"] = "none"
    show_gridlines: bool = False

    @model_validator(mode="after")
    def _check_geometry(self) -> FormatProfile:
        if self.cell_width is None:
            if self.page_width is None:
                raise ValueError(f"{self.name.value}: 未指定cell_width且无page_width可派生")
            if self.usable_width <= 0:
                raise ValueError(f"{self.name.value}: 版心宽度不为正")
            self.cell_width = self.usable_width / self.columns_per_row

        if self.paginated:
            if self.page_height is None:
                raise ValueError(f"{self.name.value}: 分页格式必须指定page_height")
            if self.rows_per_page < 1:
                raise ValueError(f"{self.name.value}: 版心高度容纳不下一行")
        return self

    @property
    def usable_width(self) -> float:
        """版心宽度"""
        if self.page_width is None:
            return self.grid_width
        return self.page_width - self.margins.left - self.margins.right

    @property
    def usable_height(self) -> float | None:
        """版心高度（无页面高度时为None）"""
        if self.page_height is None:
            return None
        return self.page_height - self.margins.top - self.margins.bottom

    @property
    def grid_width(self) -> float:
        return self.columns_per_row * (self.cell_width or 0)

    @property
    def grid_offset(self) -> float:
        """网格居中时的水平偏移"""
        if not self.center_grid or self.page_width is None:
            return 0.0
        return max(0.0, (self.usable_width - self.grid_width) / 2)

    @property
    def rows_per_page(self) -> int | None:
        """每页可容纳的行数（非分页格式为None）"""
        if not self.paginated or self.usable_height is None:
            return None
        # 1e-9 吸收浮点误差，如 720/50
        return math.floor(self.usable_height / self.row_height + 1e-9)
