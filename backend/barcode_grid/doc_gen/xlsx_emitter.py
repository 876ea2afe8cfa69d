"""
Excel输出器 - 图像行+标签行交替的工作表

职责：
1. 每个网格行占两行：图像行（row_height - label_height）+ 标签行（label_height）
2. 列宽按 cell_width 像素换算
3. 图像以单元格锚点+偏移放置（水平居中）
4. 标签单元格居中；隐藏网格线，无边框

依赖：
- openpyxl: Excel操作（图像需 Pillow）

测试要点：
- test_xlsx_signature: 以 PK 开头
- test_xlsx_labels: 标签落在图像下方的单元格
- test_xlsx_images: 图像数量与条码数一致
"""

from __future__ import annotations

import io

from openpyxl import Workbook
from openpyxl.drawing.image import Image as XLImage
from openpyxl.drawing.spreadsheet_drawing import AnchorMarker, OneCellAnchor
from openpyxl.drawing.xdr import XDRPositiveSize2D
from openpyxl.styles import Alignment, Font
from openpyxl.utils import get_column_letter
from openpyxl.utils.units import pixels_to_EMU, pixels_to_points

from ..models import FormatProfile, LayoutPlan, OutputFormat, Placement
from .base import BaseEmitter

SHEET_TITLE = "Barcodes"

# 默认字体下列宽(字符) ≈ (像素 - 5) / 7
_PX_PER_CHAR = 7
_PX_PADDING = 5


def sheet_rows_for(grid_row: int) -> tuple[int, int]:
    """网格行 → (图像行, 标签行)，均为1起的工作表行号"""
    image_row = grid_row * 2 + 1
    return image_row, image_row + 1


class XlsxEmitter(BaseEmitter):
    """Excel输出器实现"""

    format = OutputFormat.XLSX

    def _build(self, plan: LayoutPlan) -> bytes:
        profile = plan.profile
        wb = Workbook()
        ws = wb.active
        ws.title = SHEET_TITLE
        ws.sheet_view.showGridLines = profile.show_gridlines
        wb.properties.creator = "barcode-grid"

        for col in range(1, profile.columns_per_row + 1):
            ws.column_dimensions[get_column_letter(col)].width = self._column_width(profile)

        image_row_pt = pixels_to_points(profile.row_height - profile.label_height)
        label_row_pt = pixels_to_points(profile.label_height)
        for grid_row in range(plan.row_count):
            image_row, label_row = sheet_rows_for(grid_row)
            ws.row_dimensions[image_row].height = image_row_pt
            ws.row_dimensions[label_row].height = label_row_pt

        for placement in plan.placements:
            self._add_image(ws, placement, profile)
            self._write_label(ws, placement, profile)

        buffer = io.BytesIO()
        wb.save(buffer)
        return buffer.getvalue()

    @staticmethod
    def _column_width(profile: FormatProfile) -> float:
        return round((profile.cell_width - _PX_PADDING) / _PX_PER_CHAR, 2)

    @staticmethod
    def _add_image(ws, placement: Placement, profile: FormatProfile) -> None:
        """图像锚定到图像行，偏移量取自排版结果"""
        image_row, _ = sheet_rows_for(placement.row)
        img = XLImage(io.BytesIO(placement.asset.image_bytes))
        img.width = profile.image_width
        img.height = profile.image_height

        marker = AnchorMarker(
            col=placement.column,
            colOff=pixels_to_EMU(placement.image_x - placement.x_position),
            row=image_row - 1,
            rowOff=pixels_to_EMU(placement.image_y - placement.y_position),
        )
        size = XDRPositiveSize2D(
            pixels_to_EMU(profile.image_width),
            pixels_to_EMU(profile.image_height),
        )
        img.anchor = OneCellAnchor(_from=marker, ext=size)
        ws.add_image(img)

    @staticmethod
    def _write_label(ws, placement: Placement, profile: FormatProfile) -> None:
        _, label_row = sheet_rows_for(placement.row)
        cell = ws.cell(row=label_row, column=placement.column + 1, value=placement.code)
        cell.alignment = Alignment(horizontal="center", vertical="center")
        cell.font = Font(name=profile.label_font, size=profile.label_font_size)
