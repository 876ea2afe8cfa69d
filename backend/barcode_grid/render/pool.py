"""
渲染任务池 - 有序任务列表 + 按序号回收

职责：
1. 按输入顺序生成任务列表（index 即最终顺序）
2. 顺序执行或提交到有界线程池
3. 按 index 回收结果，保证排版前严格恢复输入顺序

约定：
- 任一任务失败即整体失败（RenderingError），不产生部分结果
- max_workers <= 1 时顺序执行（默认）
"""

from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor, as_completed
from dataclasses import dataclass

from ..interfaces import IBarcodeRenderer, RenderingError
from ..models import BarcodeAsset

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RenderTask:
    """单个渲染任务"""

    index: int
    code: str


def build_tasks(codes: list[str]) -> list[RenderTask]:
    """按输入顺序生成任务列表"""
    return [RenderTask(index=i, code=code) for i, code in enumerate(codes)]


def render_assets(
    codes: list[str],
    renderer: IBarcodeRenderer,
    max_workers: int = 1,
) -> list[BarcodeAsset]:
    """渲染全部编码，返回按输入顺序排列的资源"""
    tasks = build_tasks(codes)
    if not tasks:
        return []

    if max_workers <= 1 or len(tasks) == 1:
        return [_run(renderer, task) for task in tasks]

    results: list[BarcodeAsset | None] = [None] * len(tasks)
    workers = min(max_workers, len(tasks))
    logger.debug(f"并发渲染: {len(tasks)} 个编码, {workers} 个线程")

    with ThreadPoolExecutor(max_workers=workers) as pool:
        futures = {pool.submit(_run, renderer, task): task for task in tasks}
        try:
            for future in as_completed(futures):
                task = futures[future]
                results[task.index] = future.result()
        except RenderingError:
            for f in futures:
                f.cancel()
            raise

    # 全部完成后才会到这里，results 无空位
    return [asset for asset in results if asset is not None]


def _run(renderer: IBarcodeRenderer, task: RenderTask) -> BarcodeAsset:
    """执行单个任务（非 RenderingError 统一包装）"""
    try:
        return renderer.render(task.code)
    except RenderingError:
        raise
    except Exception as e:
        raise RenderingError(f"第{task.index + 1}个编码渲染失败: {task.code!r}: {e}") from e
