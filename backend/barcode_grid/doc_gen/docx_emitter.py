"""
Word输出器 - 无边框固定宽度表格

职责：
1. 按格式配置设置页面尺寸与页边距
2. 生成 columns_per_row 列的固定布局表格（整体居中，表格级与单元格级边框均置空）
3. 单元格内：条码图像居中 + 下方居中标签
4. 末行不足处写入空占位单元格（表格每行必须等宽）

依赖：
- python-docx: Word操作

测试要点：
- test_docx_signature: 以 PK 开头
- test_docx_table_shape: 行列数与排版一致
- test_docx_placeholder_cells: 占位单元格为空
- test_docx_empty: 无条码时仍可打开
"""

from __future__ import annotations

import io

from docx import Document
from docx.enum.table import WD_CELL_VERTICAL_ALIGNMENT, WD_TABLE_ALIGNMENT
from docx.enum.text import WD_ALIGN_PARAGRAPH
from docx.oxml import OxmlElement
from docx.oxml.ns import qn
from docx.shared import Pt, Twips

from ..models import FormatProfile, LayoutPlan, OutputFormat, Placement
from .base import BaseEmitter

_BORDER_EDGES = ("top", "left", "bottom", "right", "insideH", "insideV")
_CELL_BORDER_EDGES = ("top", "left", "bottom", "right")
_MARGIN_EDGES = ("top", "left", "bottom", "right")


class DocxEmitter(BaseEmitter):
    """Word输出器实现"""

    format = OutputFormat.DOCX

    def _build(self, plan: LayoutPlan) -> bytes:
        profile = plan.profile
        doc = Document()
        self._setup_section(doc, profile)

        if plan.row_count:
            table = doc.add_table(rows=plan.row_count, cols=profile.columns_per_row)
            self._setup_table(table, profile)

            for row_cells in plan.iter_rows():
                for cell in row_cells:
                    tcell = table.cell(cell.row, cell.column)
                    tcell.width = Twips(profile.cell_width)
                    tcell.vertical_alignment = WD_CELL_VERTICAL_ALIGNMENT.CENTER
                    self._clear_cell_borders(tcell)
                    if isinstance(cell, Placement):
                        self._write_cell(tcell, cell, profile)
                    # 占位单元格保留默认的空段落
        else:
            doc.add_paragraph()

        buffer = io.BytesIO()
        doc.save(buffer)
        return buffer.getvalue()

    def _setup_section(self, doc, profile: FormatProfile) -> None:
        """页面尺寸与页边距"""
        section = doc.sections[0]
        if profile.page_width and profile.page_height:
            section.page_width = Twips(profile.page_width)
            section.page_height = Twips(profile.page_height)
        section.top_margin = Twips(profile.margins.top)
        section.right_margin = Twips(profile.margins.right)
        section.bottom_margin = Twips(profile.margins.bottom)
        section.left_margin = Twips(profile.margins.left)

    def _setup_table(self, table, profile: FormatProfile) -> None:
        """固定布局、居中、无边框、统一单元格边距"""
        table.autofit = False
        if profile.center_grid:
            table.alignment = WD_TABLE_ALIGNMENT.CENTER

        for column in table.columns:
            column.width = Twips(profile.cell_width)

        tbl_pr = table._tbl.tblPr
        tbl_pr.insert_element_before(
            self._no_borders("w:tblBorders", _BORDER_EDGES),
            "w:shd", "w:tblLayout", "w:tblCellMar", "w:tblLook",
            "w:tblCaption", "w:tblDescription", "w:tblPrChange",
        )
        tbl_pr.insert_element_before(
            self._cell_margins(profile.cell_padding),
            "w:tblLook", "w:tblCaption", "w:tblDescription", "w:tblPrChange",
        )

    @staticmethod
    def _no_borders(tag: str, edges: tuple[str, ...]):
        borders = OxmlElement(tag)
        for edge in edges:
            el = OxmlElement(f"w:{edge}")
            el.set(qn("w:val"), "nil")
            el.set(qn("w:sz"), "0")
            el.set(qn("w:space"), "0")
            el.set(qn("w:color"), "FFFFFF")
            borders.append(el)
        return borders

    @classmethod
    def _clear_cell_borders(cls, tcell) -> None:
        """单元格级边框同样置空（含占位单元格）"""
        tc_pr = tcell._tc.get_or_add_tcPr()
        tc_pr.insert_element_before(
            cls._no_borders("w:tcBorders", _CELL_BORDER_EDGES),
            "w:shd", "w:noWrap", "w:tcMar", "w:textDirection", "w:tcFitText",
            "w:vAlign", "w:hideMark", "w:headers", "w:cellIns", "w:cellDel",
            "w:cellMerge", "w:tcPrChange",
        )

    @staticmethod
    def _cell_margins(padding: float):
        margins = OxmlElement("w:tblCellMar")
        for edge in _MARGIN_EDGES:
            el = OxmlElement(f"w:{edge}")
            el.set(qn("w:w"), str(int(round(padding))))
            el.set(qn("w:type"), "dxa")
            margins.append(el)
        return margins

    @staticmethod
    def _write_cell(tcell, placement: Placement, profile: FormatProfile) -> None:
        """条码图像 + 标签"""
        image_par = tcell.paragraphs[0]
        image_par.alignment = WD_ALIGN_PARAGRAPH.CENTER
        image_par.paragraph_format.space_after = Pt(0)
        image_par.add_run().add_picture(
            io.BytesIO(placement.asset.image_bytes),
            width=Twips(profile.image_width),
            height=Twips(profile.image_height),
        )

        label_par = tcell.add_paragraph()
        label_par.alignment = WD_ALIGN_PARAGRAPH.CENTER
        label_par.paragraph_format.space_before = Twips(profile.label_gap)
        label_par.paragraph_format.space_after = Pt(0)
        run = label_par.add_run(placement.code)
        run.font.name = profile.label_font
        run.font.size = Pt(profile.label_font_size)
