"""
运行期配置 - 读取 runtime.yaml（可选）+ 环境变量

职责：
- 加载并发/渲染/输出/日志等运行参数
- 提供环境变量覆盖机制（BARCODE_GRID_ 前缀，嵌套用 __；优先于 runtime.yaml）
- 类型安全的配置访问
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource


class ConcurrencyConfig(BaseModel):
    """并发配置（1 = 顺序渲染）"""

    max_workers: int = Field(1, ge=1)


class RenderConfig(BaseModel):
    """条码渲染参数（python-barcode ImageWriter 选项）"""

    module_width: float = 0.2     # mm
    module_height: float = 8.0    # mm
    quiet_zone: float = 2.5       # mm
    dpi: int = 300


class OutputConfig(BaseModel):
    """输出配置"""

    default_dir: Path = Path("output")


class LoggingConfig(BaseModel):
    """日志配置"""

    log_level: str = "INFO"
    log_format: str = "%(asctime)s %(levelname)s %(name)s: %(message)s"


class RuntimeConfig(BaseSettings):
    """运行期配置（支持环境变量覆盖）"""

    # 格式配置文件（为空则使用包内默认）
    profiles_path: Path | None = None

    # 各子配置
    concurrency: ConcurrencyConfig = Field(default_factory=ConcurrencyConfig)
    render: RenderConfig = Field(default_factory=RenderConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    model_config = {
        "env_prefix": "BARCODE_GRID_",
        "env_nested_delimiter": "__",
        "arbitrary_types_allowed": True,
    }

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """优先级：环境变量 > YAML/构造参数 > 默认值"""
        return env_settings, init_settings, dotenv_settings, file_secret_settings

    @classmethod
    def from_yaml(cls, yaml_path: str | Path) -> RuntimeConfig:
        """从YAML文件加载配置"""
        path = Path(yaml_path)
        if not path.exists():
            return cls()

        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}

        runtime_opts = data.get("runtime_options", {})

        # 以普通dict传入：环境变量按字段合并覆盖，而不是整段替换
        values: dict[str, Any] = {}
        for key in ("concurrency", "render", "output", "logging"):
            section = cls._extract(runtime_opts, key)
            if section:
                values[key] = section
        if runtime_opts.get("profiles_path"):
            values["profiles_path"] = Path(runtime_opts["profiles_path"])

        config = cls(**values)
        config._resolve_paths(base_dir=path.parent)
        return config

    @staticmethod
    def _extract(data: dict[str, Any], key: str) -> dict[str, Any]:
        """提取并展平配置"""
        section = data.get(key, {}) or {}
        result = {}
        for k, v in section.items():
            if isinstance(v, dict) and "default" in v:
                result[k] = v["default"]
            elif not isinstance(v, dict):
                result[k] = v
        return result

    def _resolve_paths(self, base_dir: Path) -> None:
        """解析相对路径配置为绝对路径（基于配置文件所在目录）"""
        if self.profiles_path and not self.profiles_path.is_absolute():
            self.profiles_path = (base_dir / self.profiles_path).resolve()
        if not self.output.default_dir.is_absolute():
            self.output.default_dir = (base_dir / self.output.default_dir).resolve()


# 全局配置实例
_config: RuntimeConfig | None = None

DEFAULT_RUNTIME_PATH = Path("config/runtime.yaml")


def get_config() -> RuntimeConfig:
    """获取全局配置（惰性加载）"""
    global _config
    if _config is None:
        _config = RuntimeConfig.from_yaml(DEFAULT_RUNTIME_PATH)
    return _config


def reload_config(yaml_path: str | Path | None = None) -> RuntimeConfig:
    """重新加载配置"""
    global _config
    path = yaml_path or DEFAULT_RUNTIME_PATH
    _config = RuntimeConfig.from_yaml(path)
    return _config


def configure_logging(config: RuntimeConfig | None = None) -> None:
    """按配置初始化根日志（仅宿主入口调用）"""
    config = config or get_config()
    logging.basicConfig(
        level=config.logging.log_level.upper(),
        format=config.logging.log_format,
    )
