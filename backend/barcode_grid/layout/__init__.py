"""
排版模块

子模块：
- grid: 网格排版与分页引擎（三种格式共用）
"""

from .grid import GridLayoutEngine

__all__ = ["GridLayoutEngine"]
