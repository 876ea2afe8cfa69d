"""
Code-128 渲染器 - 编码文本→PNG

职责：
1. 调用 python-barcode 生成不含文字的条码PNG（标签由文档输出器另行排版）
2. 读取图像像素尺寸
3. 无法编码的文本统一转换为 RenderingError

依赖：
- python-barcode: Code128 + ImageWriter
- Pillow: ImageWriter 后端，读取尺寸

测试要点：
- test_render_png: 输出为PNG且尺寸为正
- test_render_non_ascii: 非ASCII字符抛出 RenderingError
- test_render_empty: 空文本抛出 RenderingError
"""

from __future__ import annotations

import io
import logging

from barcode import Code128
from barcode.writer import ImageWriter
from PIL import Image

from ..config import RuntimeConfig, get_config
from ..interfaces import IBarcodeRenderer, RenderingError
from ..models import BarcodeAsset

logger = logging.getLogger(__name__)


class Code128Renderer(IBarcodeRenderer):
    """Code-128 渲染器实现"""

    def __init__(self, config: RuntimeConfig | None = None):
        self.config = config or get_config()

    def render(self, code: str) -> BarcodeAsset:
        """渲染单个编码"""
        self._check_encodable(code)

        buffer = io.BytesIO()
        try:
            Code128(code, writer=ImageWriter()).write(buffer, options=self._writer_options())
        except Exception as e:
            raise RenderingError(f"条码渲染失败: {code!r}: {e}") from e

        data = buffer.getvalue()
        width, height = self._read_size(code, data)
        logger.debug(f"渲染完成: {code} ({width}x{height}px)")

        return BarcodeAsset(
            code=code,
            image_bytes=data,
            intrinsic_width=width,
            intrinsic_height=height,
        )

    def _check_encodable(self, code: str) -> None:
        """Code-128 只能编码ASCII 0-127"""
        if not code:
            raise RenderingError("条码渲染失败: 编码为空")
        bad = sorted({ch for ch in code if ord(ch) > 127})
        if bad:
            raise RenderingError(
                f"条码渲染失败: {code!r} 含Code-128不支持的字符: {''.join(bad)!r}"
            )

    def _writer_options(self) -> dict:
        """ImageWriter 选项"""
        render = self.config.render
        return {
            "module_width": render.module_width,
            "module_height": render.module_height,
            "quiet_zone": render.quiet_zone,
            "dpi": render.dpi,
            "write_text": False,
            "format": "PNG",
        }

    @staticmethod
    def _read_size(code: str, data: bytes) -> tuple[int, int]:
        """读取PNG像素尺寸"""
        try:
            with Image.open(io.BytesIO(data)) as img:
                return img.size
        except Exception as e:
            raise RenderingError(f"条码图像无法读取: {code!r}: {e}") from e
