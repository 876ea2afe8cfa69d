"""
输出器基类 - 统一异常包装与格式检查
"""

from __future__ import annotations

import logging

from ..interfaces import GenerationError, IDocumentEmitter
from ..models import LayoutPlan, OutputFormat

logger = logging.getLogger(__name__)


class BaseEmitter(IDocumentEmitter):
    """输出器公共流程：检查格式 → 构建 → 包装异常"""

    format: OutputFormat

    def emit(self, plan: LayoutPlan) -> bytes:
        """按排版方案生成文档字节流"""
        if plan.profile.name != self.format:
            raise GenerationError(
                f"排版方案格式不匹配: 期望 {self.format.value}, 实际 {plan.profile.name.value}"
            )

        try:
            data = self._build(plan)
        except GenerationError:
            raise
        except Exception as e:
            raise GenerationError(f"{self.format.label} 生成失败: {e}") from e

        logger.debug(f"{self.format.value} 输出完成: {len(data)} 字节")
        return data

    def _build(self, plan: LayoutPlan) -> bytes:
        raise NotImplementedError
