"""
生成流水线执行器 - 编排 校验→渲染→排版→输出→保存

职责：
1. validate_request: 拆分输入并校验
2. generate_request: 校验通过后生成文档并保存
3. 失败原子化：文档在内存中完整构建后才解析保存位置，不产生部分文件
4. 保存位置由调用方注入（IDestinationResolver），无跨请求的全局状态

结果约定（GenerateResult）：
- 校验失败: success=False, errors=[...]（全部问题一次返回）
- 用户取消: success=False, canceled=True
- 渲染/生成/保存失败（含保存位置解析的I/O错误）: success=False, error=<信息>
- 成功: success=True, file_path=<路径>

测试要点：
- test_validation_blocks_rendering: 校验失败不调用渲染器
- test_generate_each_format: 三种格式输出
- test_cancel: 取消不写文件
- test_render_failure: 渲染失败整体失败
- test_persist_failure: 保存失败返回错误信息
"""

from __future__ import annotations

import logging
from datetime import datetime
from pathlib import Path
from typing import Callable

from ..config import ProfileSpec, RuntimeConfig, get_config, load_profiles
from ..doc_gen import get_emitter
from ..interfaces import (
    BarcodeGridError,
    IBarcodeRenderer,
    IDestinationResolver,
    ILayoutEngine,
    PersistenceError,
)
from ..layout import GridLayoutEngine
from ..models import (
    DestinationChoice,
    GenerateResult,
    LayoutPlan,
    OutputFormat,
    ValidateResult,
)
from ..render import Code128Renderer, render_assets
from ..validation import validate_text
from .destination import DirectoryDestination, default_filename
from .stages import STAGES_BY_NAME, StageEnum

logger = logging.getLogger(__name__)

NO_INPUT_MESSAGE = "No codes to generate"


class GenerationPipeline:
    """生成流水线"""

    def __init__(
        self,
        renderer: IBarcodeRenderer | None = None,
        resolver: IDestinationResolver | None = None,
        config: RuntimeConfig | None = None,
        profiles: ProfileSpec | None = None,
        layout_engine: ILayoutEngine | None = None,
        clock: Callable[[], datetime] | None = None,
    ):
        self.config = config or get_config()
        self.profiles = profiles or load_profiles(self.config.profiles_path)
        self.renderer = renderer or Code128Renderer(self.config)
        self.layout_engine = layout_engine or GridLayoutEngine()
        self.resolver = resolver or DirectoryDestination(self.config.output.default_dir)
        self.clock = clock or datetime.now

    def validate_request(self, raw_text: str) -> ValidateResult:
        """拆分并校验输入"""
        return validate_text(raw_text)

    def generate_request(
        self,
        raw_text: str,
        output_format: str | OutputFormat,
        resolver: IDestinationResolver | None = None,
    ) -> GenerateResult:
        """校验 → 生成 → 保存"""
        self._log_stage(StageEnum.VALIDATE)
        checked = self.validate_request(raw_text)
        if checked.errors:
            logger.info(f"校验未通过: {len(checked.errors)} 个编码存在前导零")
            return GenerateResult.invalid(checked.errors)
        if not checked.codes:
            return GenerateResult.failed(NO_INPUT_MESSAGE)

        try:
            fmt = OutputFormat(output_format)
        except ValueError:
            return GenerateResult.failed(f"不支持的输出格式: {output_format}")

        try:
            data, plan = self.build_document(checked.codes, fmt)
        except BarcodeGridError as e:
            logger.error(f"文档生成失败[{fmt.value}]: {e}")
            return GenerateResult.failed(str(e))

        self._log_stage(StageEnum.PERSIST)
        filename = default_filename(fmt, self.clock())
        try:
            choice = self._resolve(resolver or self.resolver, filename, fmt)
            if choice.canceled or not choice.file_path:
                logger.info("用户取消保存")
                return GenerateResult.cancelled()
            self._persist(choice.file_path, data)
        except PersistenceError as e:
            logger.error(str(e))
            return GenerateResult.failed(str(e))

        logger.info(
            f"生成完成: {choice.file_path} ({len(checked.codes)} 个编码, {plan.page_count} 页)"
        )
        return GenerateResult(
            success=True,
            file_path=choice.file_path,
            code_count=len(checked.codes),
            page_count=plan.page_count,
        )

    def build_document(
        self,
        codes: list[str],
        output_format: str | OutputFormat,
    ) -> tuple[bytes, LayoutPlan]:
        """渲染 → 排版 → 输出（全部在内存中完成）"""
        fmt = OutputFormat(output_format)
        profile = self.profiles.get_profile(fmt)

        self._log_stage(StageEnum.RENDER)
        assets = render_assets(
            codes,
            self.renderer,
            max_workers=self.config.concurrency.max_workers,
        )

        self._log_stage(StageEnum.LAYOUT)
        plan = self.layout_engine.layout(assets, profile)

        self._log_stage(StageEnum.EMIT)
        data = get_emitter(fmt).emit(plan)
        return data, plan

    @staticmethod
    def _resolve(
        resolver: IDestinationResolver,
        filename: str,
        fmt: OutputFormat,
    ) -> DestinationChoice:
        """解析保存位置（建目录/宿主对话框的I/O错误统一为 PersistenceError）"""
        try:
            return resolver.resolve(filename, fmt)
        except OSError as e:
            raise PersistenceError(f"保存位置不可用: {filename}: {e}") from e

    @staticmethod
    def _persist(file_path: Path, data: bytes) -> None:
        """写入完整字节流"""
        try:
            file_path.parent.mkdir(parents=True, exist_ok=True)
            file_path.write_bytes(data)
        except OSError as e:
            raise PersistenceError(f"保存失败: {file_path}: {e}") from e

    @staticmethod
    def _log_stage(stage: StageEnum) -> None:
        info = STAGES_BY_NAME[stage]
        logger.info(f"开始阶段: {stage.value} ({info.progress_start}%)")
