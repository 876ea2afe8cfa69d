"""
PDF输出器 - 按排版方案逐页绘制

职责：
1. 按格式配置设置页面尺寸
2. 每个排版页调用一次 showPage（空方案也输出一页）
3. 坐标换算：排版坐标原点在左上，PDF原点在左下

依赖：
- reportlab: PDF绘制（invariant 模式，相同输入产生相同字节）

测试要点：
- test_pdf_signature: 以 %PDF 开头
- test_pdf_page_count: 页数与排版一致
"""

from __future__ import annotations

import io

from reportlab.lib.utils import ImageReader
from reportlab.pdfgen import canvas

from ..models import FormatProfile, LayoutPlan, OutputFormat, Placement
from .base import BaseEmitter


class PdfEmitter(BaseEmitter):
    """PDF输出器实现"""

    format = OutputFormat.PDF

    def _build(self, plan: LayoutPlan) -> bytes:
        profile = plan.profile
        buffer = io.BytesIO()
        c = canvas.Canvas(
            buffer,
            pagesize=(profile.page_width, profile.page_height),
            invariant=1,
        )
        c.setCreator("barcode-grid")
        c.setTitle("Barcodes")

        for page_index in range(plan.page_count):
            for placement in plan.placements_on_page(page_index):
                self._draw(c, placement, profile)
            c.showPage()

        c.save()
        return buffer.getvalue()

    @staticmethod
    def _draw(c, placement: Placement, profile: FormatProfile) -> None:
        """条码图像 + 居中标签"""
        page_height = profile.page_height
        c.drawImage(
            ImageReader(io.BytesIO(placement.asset.image_bytes)),
            placement.image_x,
            page_height - placement.image_y - profile.image_height,
            width=profile.image_width,
            height=profile.image_height,
        )

        # 标签顶边在 label_y，基线下移一个字号
        c.setFont(profile.label_font, profile.label_font_size)
        c.drawCentredString(
            placement.label_x + profile.cell_width / 2,
            page_height - placement.label_y - profile.label_font_size,
            placement.code,
        )
