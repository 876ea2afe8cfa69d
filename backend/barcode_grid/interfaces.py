"""
模块接口契约 - 定义各模块的抽象接口

设计原则：
1. 模块间通过接口通信，不直接依赖具体实现
2. 每个接口定义清晰的输入输出类型
3. 便于单元测试和mock替换

使用方式：
    from barcode_grid.interfaces import IBarcodeRenderer

    class MyRenderer(IBarcodeRenderer):
        def render(self, code: str) -> BarcodeAsset:
            ...
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .models import (
        BarcodeAsset,
        DestinationChoice,
        FormatProfile,
        LayoutPlan,
        OutputFormat,
    )


# ============================================================================
# 渲染模块接口
# ============================================================================

class IBarcodeRenderer(ABC):
    """条码渲染器接口 - 文本→PNG图像"""

    @abstractmethod
    def render(self, code: str) -> BarcodeAsset:
        """
        渲染单个编码为Code-128条码

        Args:
            code: 已校验的编码文本

        Returns:
            条码资源（PNG字节+像素尺寸）

        Raises:
            RenderingError: 文本无法编码或渲染失败
        """
        ...


# ============================================================================
# 排版与输出模块接口
# ============================================================================

class ILayoutEngine(ABC):
    """网格排版引擎接口"""

    @abstractmethod
    def layout(self, assets: list[BarcodeAsset], profile: FormatProfile) -> LayoutPlan:
        """
        计算放置方案

        Args:
            assets: 按输入顺序排列的条码资源
            profile: 目标格式的几何配置

        Returns:
            排版方案（放置位置、占位单元格、页数）
        """
        ...


class IDocumentEmitter(ABC):
    """文档输出器接口 - 每种格式一个实现"""

    format: OutputFormat

    @abstractmethod
    def emit(self, plan: LayoutPlan) -> bytes:
        """
        按排版方案生成文档字节流

        Args:
            plan: 排版方案（含格式配置）

        Returns:
            完整的文档字节流（内存中构建完毕）

        Raises:
            GenerationError: 文档构建失败
        """
        ...


# ============================================================================
# 保存位置接口
# ============================================================================

class IDestinationResolver(ABC):
    """保存位置解析接口 - 由调用方注入（替代全局mock变量）"""

    @abstractmethod
    def resolve(self, default_filename: str, output_format: OutputFormat) -> DestinationChoice:
        """
        决定文档保存路径

        Args:
            default_filename: 默认文件名（barcode_日期_时间.扩展名）
            output_format: 输出格式

        Returns:
            保存选择（路径或取消）
        """
        ...


# ============================================================================
# 异常定义
# ============================================================================

class BarcodeGridError(Exception):
    """基础异常"""
    pass


class ProfileError(BarcodeGridError):
    """格式配置错误"""
    pass


class RenderingError(BarcodeGridError):
    """条码渲染错误"""
    pass


class GenerationError(BarcodeGridError):
    """文档生成错误"""
    pass


class PersistenceError(BarcodeGridError):
    """保存错误"""
    pass
