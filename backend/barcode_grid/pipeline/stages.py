"""
流水线阶段定义

职责：
1. 定义各阶段的名称与进度区间
2. 供执行器记录日志与进度

阶段顺序固定：校验失败时不会进入 RENDER（不做无用的渲染）
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class StageEnum(str, Enum):
    """流水线阶段枚举"""
    VALIDATE = "VALIDATE"
    RENDER = "RENDER"
    LAYOUT = "LAYOUT"
    EMIT = "EMIT"
    PERSIST = "PERSIST"


@dataclass(frozen=True)
class PipelineStage:
    """流水线阶段"""
    name: StageEnum
    progress_start: int  # 进度起点（0-100）
    progress_end: int    # 进度终点


# 生成流水线各阶段配置
GENERATION_STAGES: list[PipelineStage] = [
    PipelineStage(StageEnum.VALIDATE, 0, 5),
    PipelineStage(StageEnum.RENDER, 5, 60),
    PipelineStage(StageEnum.LAYOUT, 60, 65),
    PipelineStage(StageEnum.EMIT, 65, 95),
    PipelineStage(StageEnum.PERSIST, 95, 100),
]

STAGES_BY_NAME: dict[StageEnum, PipelineStage] = {s.name: s for s in GENERATION_STAGES}
