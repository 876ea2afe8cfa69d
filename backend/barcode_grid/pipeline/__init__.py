"""
流水线模块 - 生成编排与保存

子模块：
- stages: 流水线各阶段定义
- destination: 保存位置解析策略
- executor: 流水线执行器
"""

from .destination import (
    CallbackDestination,
    DirectoryDestination,
    FixedDestination,
    default_filename,
)
from .executor import NO_INPUT_MESSAGE, GenerationPipeline
from .stages import GENERATION_STAGES, PipelineStage, StageEnum

__all__ = [
    "GenerationPipeline",
    "NO_INPUT_MESSAGE",
    "PipelineStage",
    "StageEnum",
    "GENERATION_STAGES",
    "FixedDestination",
    "DirectoryDestination",
    "CallbackDestination",
    "default_filename",
]
