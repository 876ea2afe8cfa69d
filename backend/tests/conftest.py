"""
pytest 配置与公共 fixtures

使用方式：
    def test_something(profiles, make_assets):
        plan = GridLayoutEngine().layout(make_assets(21), profiles.get_profile("pdf"))
"""

from __future__ import annotations

import io
import tempfile
import threading
import time
from pathlib import Path
from typing import Callable, Generator

import pytest
from PIL import Image, ImageDraw

from barcode_grid.config import ProfileLoader, ProfileSpec, RuntimeConfig
from barcode_grid.interfaces import IBarcodeRenderer, RenderingError
from barcode_grid.models import BarcodeAsset, FormatProfile

FAKE_WIDTH = 120
FAKE_HEIGHT = 40


def make_png(width: int = FAKE_WIDTH, height: int = FAKE_HEIGHT) -> bytes:
    """生成一张条纹PNG（代替真实条码）"""
    img = Image.new("RGB", (width, height), "white")
    draw = ImageDraw.Draw(img)
    for x in range(4, width - 4, 6):
        draw.rectangle([x, 2, x + 2, height - 3], fill="black")
    buffer = io.BytesIO()
    img.save(buffer, format="PNG")
    return buffer.getvalue()


_PNG = make_png()


class FakeRenderer(IBarcodeRenderer):
    """假渲染器：记录调用，可按编码注入失败/延迟"""

    def __init__(
        self,
        fail_on: set[str] | None = None,
        delays: dict[str, float] | None = None,
    ):
        self.fail_on = fail_on or set()
        self.delays = delays or {}
        self.calls: list[str] = []
        self._lock = threading.Lock()

    def render(self, code: str) -> BarcodeAsset:
        with self._lock:
            self.calls.append(code)
        if code in self.delays:
            time.sleep(self.delays[code])
        if code in self.fail_on:
            raise RenderingError(f"条码渲染失败: {code!r}")
        return BarcodeAsset(
            code=code,
            image_bytes=_PNG,
            intrinsic_width=FAKE_WIDTH,
            intrinsic_height=FAKE_HEIGHT,
        )


# ============================================================================
# 配置 Fixtures
# ============================================================================

@pytest.fixture(scope="session")
def profiles() -> ProfileSpec:
    """包内默认格式配置"""
    return ProfileLoader.load()


@pytest.fixture
def runtime_config() -> RuntimeConfig:
    """运行期配置"""
    return RuntimeConfig()


@pytest.fixture
def docx_profile(profiles: ProfileSpec) -> FormatProfile:
    return profiles.get_profile("docx")


@pytest.fixture
def xlsx_profile(profiles: ProfileSpec) -> FormatProfile:
    return profiles.get_profile("xlsx")


@pytest.fixture
def pdf_profile(profiles: ProfileSpec) -> FormatProfile:
    return profiles.get_profile("pdf")


# ============================================================================
# 渲染 Fixtures
# ============================================================================

@pytest.fixture
def fake_renderer() -> FakeRenderer:
    return FakeRenderer()


@pytest.fixture
def make_renderer() -> type[FakeRenderer]:
    """可注入失败/延迟的假渲染器类"""
    return FakeRenderer


@pytest.fixture
def make_assets() -> Callable[[int], list[BarcodeAsset]]:
    """按数量生成条码资源（编码为 ITEM-001 起）"""
    renderer = FakeRenderer()

    def _make(count: int) -> list[BarcodeAsset]:
        return [renderer.render(f"ITEM-{i + 1:03d}") for i in range(count)]

    return _make


# ============================================================================
# 文件 Fixtures
# ============================================================================

@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """临时目录"""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)
