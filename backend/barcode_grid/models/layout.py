"""
排版方案模型 - 网格排版引擎的输出

不变量：
- row * columns_per_row + column == index（严格保持输入顺序）
- (page_index, row, column) 唯一
"""

from __future__ import annotations

from pydantic import BaseModel, Field

from .asset import BarcodeAsset
from .profile import FormatProfile


class Placement(BaseModel):
    """单个条码的放置位置"""
    asset: BarcodeAsset
    index: int = Field(..., ge=0, description="输入序号(0起)")
    row: int = Field(..., ge=0, description="全局行号")
    column: int = Field(..., ge=0)
    page_index: int = Field(0, ge=0)
    row_in_page: int = Field(0, ge=0)

    # 单元格左上角
    x_position: float
    y_position: float

    # 图像与标签的左上角
    image_x: float
    image_y: float
    label_x: float
    label_y: float

    @property
    def code(self) -> str:
        return self.asset.code


class PlaceholderCell(BaseModel):
    """末行补齐用的空单元格（无资源、无边框）"""
    row: int = Field(..., ge=0)
    column: int = Field(..., ge=0)
    page_index: int = Field(0, ge=0)


class LayoutPlan(BaseModel):
    """排版方案"""
    profile: FormatProfile
    placements: list[Placement] = Field(default_factory=list)
    placeholders: list[PlaceholderCell] = Field(default_factory=list)
    page_count: int = Field(1, ge=1)
    row_count: int = Field(0, ge=0)

    def placements_on_page(self, page_index: int) -> list[Placement]:
        """获取某页的放置（保持输入顺序）"""
        return [p for p in self.placements if p.page_index == page_index]

    def rows_on_page(self, page_index: int) -> int:
        """某页占用的行数"""
        return len({p.row for p in self.placements if p.page_index == page_index})

    def cell_at(self, row: int, column: int) -> Placement | PlaceholderCell | None:
        """按行列查找单元格"""
        for p in self.placements:
            if p.row == row and p.column == column:
                return p
        for ph in self.placeholders:
            if ph.row == row and ph.column == column:
                return ph
        return None

    def iter_rows(self) -> list[list[Placement | PlaceholderCell]]:
        """按行分组（含占位单元格），供表格类输出器使用"""
        rows: list[list[Placement | PlaceholderCell]] = [[] for _ in range(self.row_count)]
        for p in self.placements:
            rows[p.row].append(p)
        for ph in self.placeholders:
            rows[ph.row].append(ph)
        for cells in rows:
            cells.sort(key=lambda c: c.column)
        return rows
