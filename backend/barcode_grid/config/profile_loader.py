"""
格式配置加载器 - 读取 format_profiles.yaml

职责：
- 解析YAML并校验为 FormatProfile（排版前拒绝非法配置）
- 缓存加载结果（避免重复解析）

使用方式：
    spec = ProfileLoader.load()
    profile = spec.get_profile("pdf")
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

import yaml
from pydantic import BaseModel, Field, ValidationError

from ..interfaces import ProfileError
from ..models import FormatProfile, OutputFormat

DEFAULT_PROFILES_PATH = Path(__file__).with_name("format_profiles.yaml")


class ProfileSpec(BaseModel):
    """格式配置表（format_profiles.yaml 的结构化表示）"""
    schema_version: str
    profiles: dict[OutputFormat, FormatProfile] = Field(default_factory=dict)

    def get_profile(self, output_format: str | OutputFormat) -> FormatProfile:
        """获取格式配置"""
        try:
            key = OutputFormat(output_format)
        except ValueError as e:
            raise ProfileError(f"不支持的输出格式: {output_format}") from e
        if key not in self.profiles:
            raise ProfileError(f"格式配置缺失: {key.value}")
        return self.profiles[key]

    @property
    def formats(self) -> list[OutputFormat]:
        return list(self.profiles)


class ProfileLoader:
    """格式配置加载器（缓存）"""

    @classmethod
    @lru_cache(maxsize=4)
    def load(cls, profiles_path: str | Path = DEFAULT_PROFILES_PATH) -> ProfileSpec:
        """加载并缓存格式配置"""
        path = Path(profiles_path)
        if not path.exists():
            raise FileNotFoundError(f"格式配置文件不存在: {path}")

        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}

        # 以键名补全 name 字段
        for key, raw in (data.get("profiles") or {}).items():
            if isinstance(raw, dict):
                raw.setdefault("name", key)

        try:
            return ProfileSpec(**data)
        except ValidationError as e:
            raise ProfileError(f"格式配置非法: {path}: {e}") from e

    @classmethod
    def reload(cls, profiles_path: str | Path = DEFAULT_PROFILES_PATH) -> ProfileSpec:
        """强制重新加载（清除缓存）"""
        cls.load.cache_clear()
        return cls.load(profiles_path)


# 便捷函数
def load_profiles(profiles_path: str | Path | None = None) -> ProfileSpec:
    """加载格式配置"""
    return ProfileLoader.load(profiles_path or DEFAULT_PROFILES_PATH)
