"""
生成流水线单元测试
"""

from datetime import datetime

import pytest

from barcode_grid.doc_gen import count_pdf_pages
from barcode_grid.models import OutputFormat
from barcode_grid.pipeline import (
    NO_INPUT_MESSAGE,
    CallbackDestination,
    DirectoryDestination,
    FixedDestination,
    GenerationPipeline,
    default_filename,
)

FIXED_NOW = datetime(2024, 3, 5, 14, 7, 9)


@pytest.fixture
def make_pipeline(runtime_config, profiles, fake_renderer):
    def _make(renderer=None, resolver=None):
        return GenerationPipeline(
            renderer=renderer or fake_renderer,
            resolver=resolver,
            config=runtime_config,
            profiles=profiles,
            clock=lambda: FIXED_NOW,
        )

    return _make


def _codes(count: int) -> str:
    return "\n".join(f"ITEM-{i + 1:03d}" for i in range(count))


class TestValidation:
    """校验阶段测试"""

    def test_validate_request(self, make_pipeline):
        checked = make_pipeline().validate_request("A1\n\n  B2  \n")
        assert checked.codes == ["A1", "B2"]
        assert checked.is_valid

    def test_validation_blocks_rendering(self, make_pipeline, fake_renderer, temp_dir):
        """校验失败：不渲染、不解析位置、不写文件"""
        asked = []
        resolver = CallbackDestination(lambda name, fmt: asked.append(name) or temp_dir / name)

        result = make_pipeline(resolver=resolver).generate_request("A1\n0123\nB2\n007", "pdf")

        assert not result.success
        assert [(e.line_number, e.code) for e in result.errors] == [(2, "0123"), (4, "007")]
        assert fake_renderer.calls == []
        assert asked == []
        assert list(temp_dir.iterdir()) == []

    def test_no_input(self, make_pipeline, fake_renderer):
        result = make_pipeline(resolver=FixedDestination("unused.pdf")).generate_request(" \n\n", "pdf")
        assert not result.success
        assert result.error == NO_INPUT_MESSAGE
        assert fake_renderer.calls == []

    def test_unknown_format(self, make_pipeline):
        result = make_pipeline(resolver=FixedDestination("x.odt")).generate_request("A1", "odt")
        assert not result.success
        assert "odt" in result.error


class TestGenerate:
    """生成与保存测试"""

    @pytest.mark.parametrize("fmt,signature", [("docx", b"PK"), ("xlsx", b"PK"), ("pdf", b"%PDF")])
    def test_generate_each_format(self, make_pipeline, temp_dir, fmt, signature):
        target = temp_dir / f"labels.{fmt}"
        result = make_pipeline(resolver=FixedDestination(target)).generate_request(_codes(21), fmt)

        assert result.success, result.error
        assert result.file_path == target
        assert result.code_count == 21
        assert result.page_count == 1
        assert target.read_bytes().startswith(signature)

    def test_pdf_two_pages(self, make_pipeline, temp_dir):
        target = temp_dir / "labels.pdf"
        result = make_pipeline(resolver=FixedDestination(target)).generate_request(_codes(99), "pdf")
        assert result.page_count == 2
        assert count_pdf_pages(target) == 2

    def test_per_call_resolver(self, make_pipeline, temp_dir):
        """调用时传入的解析器优先"""
        pipeline = make_pipeline(resolver=FixedDestination(canceled=True))
        target = temp_dir / "override.xlsx"
        result = pipeline.generate_request("A1", OutputFormat.XLSX, resolver=FixedDestination(target))
        assert result.success
        assert target.exists()

    def test_directory_destination(self, make_pipeline, temp_dir):
        out_dir = temp_dir / "nested" / "out"
        result = make_pipeline(resolver=DirectoryDestination(out_dir)).generate_request("A1", "docx")
        assert result.success
        assert result.file_path == out_dir / "barcode_2024-03-05_14-07-09.docx"
        assert result.file_path.exists()

    def test_concurrent_rendering(self, runtime_config, profiles, make_renderer, temp_dir):
        runtime_config.concurrency.max_workers = 4
        renderer = make_renderer(delays={"ITEM-001": 0.05})
        pipeline = GenerationPipeline(
            renderer=renderer,
            resolver=FixedDestination(temp_dir / "out.xlsx"),
            config=runtime_config,
            profiles=profiles,
        )
        data, plan = pipeline.build_document([f"ITEM-{i:03d}" for i in range(1, 15)], "xlsx")
        assert data[:2] == b"PK"
        assert [p.code for p in plan.placements] == [f"ITEM-{i:03d}" for i in range(1, 15)]


class TestCancelAndFailure:
    """取消与失败测试"""

    def test_cancel(self, make_pipeline, temp_dir):
        result = make_pipeline(resolver=FixedDestination(canceled=True)).generate_request("A1", "pdf")
        assert result.canceled
        assert not result.success
        assert result.error is None
        assert list(temp_dir.iterdir()) == []

    def test_empty_path_is_cancel(self, make_pipeline):
        result = make_pipeline(resolver=FixedDestination(None)).generate_request("A1", "pdf")
        assert result.canceled

    def test_callback_receives_default_name(self, make_pipeline):
        seen = []

        def dialog(name, fmt):
            seen.append((name, fmt))
            return None

        result = make_pipeline(resolver=CallbackDestination(dialog)).generate_request("A1", "xlsx")
        assert result.canceled
        assert seen == [("barcode_2024-03-05_14-07-09.xlsx", OutputFormat.XLSX)]

    def test_render_failure(self, make_pipeline, make_renderer, temp_dir):
        """任一编码渲染失败则整体失败，不写文件"""
        target = temp_dir / "out.pdf"
        renderer = make_renderer(fail_on={"B2"})
        result = make_pipeline(renderer=renderer, resolver=FixedDestination(target)).generate_request(
            "A1\nB2\nC3", "pdf"
        )
        assert not result.success
        assert "B2" in result.error
        assert not target.exists()

    def test_persist_failure(self, make_pipeline, temp_dir):
        """父路径是文件时保存失败"""
        blocker = temp_dir / "blocker"
        blocker.write_text("x")
        result = make_pipeline(resolver=FixedDestination(blocker / "out.pdf")).generate_request("A1", "pdf")
        assert not result.success
        assert not result.canceled
        assert result.error

    def test_output_dir_unavailable(self, make_pipeline, temp_dir):
        """输出目录无法创建时返回失败结果而非抛出异常"""
        blocker = temp_dir / "blocker"
        blocker.write_text("x")
        result = make_pipeline(resolver=DirectoryDestination(blocker / "out")).generate_request("A1", "pdf")
        assert not result.success
        assert not result.canceled
        assert "保存位置不可用" in result.error

    def test_callback_io_error(self, make_pipeline, temp_dir):
        """宿主回调的I/O错误返回失败结果，不写文件"""

        def dialog(name, fmt):
            raise OSError("dialog failed")

        result = make_pipeline(resolver=CallbackDestination(dialog)).generate_request("A1", "xlsx")
        assert not result.success
        assert not result.canceled
        assert "dialog failed" in result.error
        assert list(temp_dir.iterdir()) == []


class TestDefaultFilename:
    """默认文件名测试"""

    @pytest.mark.parametrize("fmt", ["docx", "xlsx", "pdf"])
    def test_pattern(self, fmt):
        assert default_filename(fmt, FIXED_NOW) == f"barcode_2024-03-05_14-07-09.{fmt}"
