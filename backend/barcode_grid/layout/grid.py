"""
网格排版引擎 - 条码+标签单元在行/列/页上的放置

职责：
1. 按输入顺序切分为每行 columns_per_row 个单元（末行可不足）
2. 分页格式：一行放不下时在上边距处开新页
3. 计算单元格、图像（水平居中）、标签（图像下方）的位置
4. 末行不足时，按格式规则补占位单元格或直接结束

算法对三种格式相同，只有几何参数不同（见 FormatProfile）。
单趟、只前进：已放置的行不会回流。

测试要点：
- test_index_invariant: row * columns + column == index
- test_page_break: 下一行溢出时恰好分页
- test_placeholder_fill: 末行占位单元格
- test_empty_layout: 无资源时单页空方案
"""

from __future__ import annotations

import logging

from ..interfaces import ILayoutEngine
from ..models import (
    BarcodeAsset,
    FormatProfile,
    LayoutPlan,
    PlaceholderCell,
    Placement,
)

logger = logging.getLogger(__name__)


class GridLayoutEngine(ILayoutEngine):
    """网格排版引擎实现"""

    def layout(self, assets: list[BarcodeAsset], profile: FormatProfile) -> LayoutPlan:
        """计算放置方案"""
        columns = profile.columns_per_row
        rows = [assets[i:i + columns] for i in range(0, len(assets), columns)]

        placements: list[Placement] = []
        placeholders: list[PlaceholderCell] = []

        page_index = 0
        row_in_page = 0
        for row_index, row_assets in enumerate(rows):
            # 分页：当前页已满则换页
            if self._needs_new_page(profile, row_in_page):
                page_index += 1
                row_in_page = 0

            y = profile.margins.top + row_in_page * profile.row_height
            for column, asset in enumerate(row_assets):
                placements.append(
                    self._place(asset, row_index, column, page_index, row_in_page, y, profile)
                )

            if profile.fill_short_row:
                for column in range(len(row_assets), columns):
                    placeholders.append(
                        PlaceholderCell(row=row_index, column=column, page_index=page_index)
                    )

            row_in_page += 1

        plan = LayoutPlan(
            profile=profile,
            placements=placements,
            placeholders=placeholders,
            page_count=page_index + 1,
            row_count=len(rows),
        )
        logger.debug(
            f"排版完成[{profile.name.value}]: {len(placements)} 个条码, "
            f"{plan.row_count} 行, {plan.page_count} 页, {len(placeholders)} 个占位"
        )
        return plan

    @staticmethod
    def _needs_new_page(profile: FormatProfile, row_in_page: int) -> bool:
        """下一行是否会超出当前页剩余高度"""
        if not profile.paginated:
            return False
        return row_in_page >= profile.rows_per_page

    @staticmethod
    def _place(
        asset: BarcodeAsset,
        row: int,
        column: int,
        page_index: int,
        row_in_page: int,
        y: float,
        profile: FormatProfile,
    ) -> Placement:
        """计算单个单元的位置"""
        cell_width = profile.cell_width
        x = profile.margins.left + profile.grid_offset + column * cell_width

        image_x = x + (cell_width - profile.image_width) / 2
        image_y = y + profile.cell_padding

        return Placement(
            asset=asset,
            index=row * profile.columns_per_row + column,
            row=row,
            column=column,
            page_index=page_index,
            row_in_page=row_in_page,
            x_position=x,
            y_position=y,
            image_x=image_x,
            image_y=image_y,
            label_x=x,
            label_y=image_y + profile.image_height + profile.label_gap,
        )
