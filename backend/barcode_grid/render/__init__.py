"""
条码渲染模块

子模块：
- code128: Code-128 渲染器（python-barcode + Pillow）
- pool: 渲染任务列表与按序回收
"""

from .code128 import Code128Renderer
from .pool import RenderTask, build_tasks, render_assets

__all__ = [
    "Code128Renderer",
    "RenderTask",
    "build_tasks",
    "render_assets",
]
