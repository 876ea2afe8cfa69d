"""
PDF页数统计 - 用于核对输出页数与排版页数

依赖：
- pdfplumber
"""

from __future__ import annotations

import io
from pathlib import Path

import pdfplumber


def count_pdf_pages(source: bytes | Path) -> int:
    """计算PDF页数（字节流或文件路径）"""
    stream = io.BytesIO(source) if isinstance(source, bytes) else str(source)
    with pdfplumber.open(stream) as pdf:
        return len(pdf.pages)
