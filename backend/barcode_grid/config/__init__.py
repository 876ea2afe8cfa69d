"""
配置层 - 加载格式配置与运行期配置

职责：
- 加载 format_profiles.yaml（三种输出格式的几何配置）
- 加载 runtime.yaml / 环境变量（运行期参数）
- 提供类型安全的配置访问接口
"""

from .profile_loader import ProfileLoader, ProfileSpec, load_profiles
from .runtime_config import RuntimeConfig, configure_logging, get_config, reload_config

__all__ = [
    "ProfileLoader",
    "ProfileSpec",
    "load_profiles",
    "RuntimeConfig",
    "configure_logging",
    "get_config",
    "reload_config",
]
