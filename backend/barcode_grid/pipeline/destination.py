"""
保存位置解析 - 由调用方在调用时注入的策略

取代全局可写的mock变量：测试传入 FixedDestination，
CLI 传入 FixedDestination/DirectoryDestination，GUI 宿主可用 CallbackDestination 包装保存对话框。

约定：
- 返回 canceled=True 或空路径均视为"用户取消"，流水线静默结束
"""

from __future__ import annotations

from datetime import datetime
from pathlib import Path
from typing import Callable

from ..interfaces import IDestinationResolver
from ..models import DestinationChoice, OutputFormat


def default_filename(output_format: str | OutputFormat, now: datetime | None = None) -> str:
    """默认文件名：barcode_<YYYY-MM-DD>_<HH-MM-SS>.<ext>（本地时间）"""
    now = now or datetime.now()
    ext = OutputFormat(output_format).extension
    return f"barcode_{now:%Y-%m-%d}_{now:%H-%M-%S}.{ext}"


class FixedDestination(IDestinationResolver):
    """固定结果（测试/CLI --output）"""

    def __init__(self, file_path: str | Path | None = None, canceled: bool = False):
        self.file_path = Path(file_path) if file_path else None
        self.canceled = canceled

    def resolve(self, default_filename: str, output_format: OutputFormat) -> DestinationChoice:
        return DestinationChoice(file_path=self.file_path, canceled=self.canceled)


class DirectoryDestination(IDestinationResolver):
    """保存到指定目录，使用默认文件名"""

    def __init__(self, directory: str | Path):
        self.directory = Path(directory)

    def resolve(self, default_filename: str, output_format: OutputFormat) -> DestinationChoice:
        self.directory.mkdir(parents=True, exist_ok=True)
        return DestinationChoice(file_path=self.directory / default_filename)


class CallbackDestination(IDestinationResolver):
    """包装宿主回调（如保存对话框）；回调返回 None 表示取消"""

    def __init__(self, callback: Callable[[str, OutputFormat], str | Path | None]):
        self.callback = callback

    def resolve(self, default_filename: str, output_format: OutputFormat) -> DestinationChoice:
        chosen = self.callback(default_filename, output_format)
        if not chosen:
            return DestinationChoice(canceled=True)
        return DestinationChoice(file_path=Path(chosen))
