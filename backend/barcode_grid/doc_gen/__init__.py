"""
文档输出模块 - Word/Excel/PDF

子模块：
- base: 输出器基类
- docx_emitter: Word表格输出
- xlsx_emitter: Excel工作表输出
- pdf_emitter: PDF逐页绘制
- pdf_pages: PDF页数统计
"""

from ..interfaces import GenerationError, IDocumentEmitter
from ..models import OutputFormat
from .docx_emitter import DocxEmitter
from .pdf_emitter import PdfEmitter
from .pdf_pages import count_pdf_pages
from .xlsx_emitter import XlsxEmitter

EMITTERS: dict[OutputFormat, type[IDocumentEmitter]] = {
    OutputFormat.DOCX: DocxEmitter,
    OutputFormat.PDF: PdfEmitter,
    OutputFormat.XLSX: XlsxEmitter,
}


def get_emitter(output_format: str | OutputFormat) -> IDocumentEmitter:
    """按格式获取输出器"""
    try:
        return EMITTERS[OutputFormat(output_format)]()
    except (KeyError, ValueError) as e:
        raise GenerationError(f"不支持的输出格式: {output_format}") from e


__all__ = [
    "EMITTERS",
    "DocxEmitter",
    "PdfEmitter",
    "XlsxEmitter",
    "count_pdf_pages",
    "get_emitter",
]
