"""
命令行入口 - 替代GUI宿主

示例：
  barcode-grid validate codes.txt
  barcode-grid generate codes.txt --format pdf --output-dir out/
  cat codes.txt | barcode-grid generate - --format xlsx --output labels.xlsx

退出码：0=成功，1=校验/生成失败，2=取消
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from .config import configure_logging, get_config, reload_config
from .models import GenerateResult, OutputFormat, ValidationIssue
from .pipeline import DirectoryDestination, FixedDestination, GenerationPipeline

EXIT_OK = 0
EXIT_FAILED = 1
EXIT_CANCELED = 2


def _read_input(source: str) -> str:
    """读取编码文本（utf-8-sig 去除文件开头的BOM）"""
    if source == "-":
        return sys.stdin.read()
    return Path(source).read_text(encoding="utf-8-sig")


def _print_issues(issues: list[ValidationIssue]) -> None:
    for issue in issues:
        print(f"line {issue.line_number}: {issue.message}", file=sys.stderr)


def _build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog="barcode-grid", description="Code-128 条码网格文档生成")
    ap.add_argument("--config", help="runtime.yaml 路径")
    sub = ap.add_subparsers(dest="command", required=True)

    p_val = sub.add_parser("validate", help="仅校验编码")
    p_val.add_argument("input", nargs="?", default="-", help="编码文件（- 为标准输入）")

    p_gen = sub.add_parser("generate", help="生成条码文档")
    p_gen.add_argument("input", nargs="?", default="-", help="编码文件（- 为标准输入）")
    p_gen.add_argument(
        "--format",
        choices=[f.value for f in OutputFormat],
        default=OutputFormat.DOCX.value,
    )
    dest = p_gen.add_mutually_exclusive_group()
    dest.add_argument("--output", help="输出文件路径")
    dest.add_argument("--output-dir", help="输出目录（使用默认文件名）")
    p_gen.add_argument("--workers", type=int, help="并发渲染线程数")
    return ap


def _report(result: GenerateResult) -> int:
    if result.success:
        print(result.file_path)
        return EXIT_OK
    if result.canceled:
        return EXIT_CANCELED
    if result.errors:
        print("Validation Failed", file=sys.stderr)
        _print_issues(result.errors)
    else:
        print(f"Error: {result.error}", file=sys.stderr)
    return EXIT_FAILED


def main(argv: list[str] | None = None) -> int:
    args = _build_parser().parse_args(argv)

    config = reload_config(args.config) if args.config else get_config()
    configure_logging(config)

    try:
        raw_text = _read_input(args.input)
    except (OSError, UnicodeDecodeError) as e:
        print(f"Error: 无法读取输入: {e}", file=sys.stderr)
        return EXIT_FAILED

    if args.command == "validate":
        checked = GenerationPipeline(config=config).validate_request(raw_text)
        if checked.errors:
            _print_issues(checked.errors)
            return EXIT_FAILED
        print(f"{len(checked.codes)} codes OK")
        return EXIT_OK

    if args.workers is not None:
        # 仅作用于本次调用，不改动全局配置
        config = config.model_copy(deep=True)
        config.concurrency.max_workers = max(1, args.workers)

    if args.output:
        resolver = FixedDestination(args.output)
    else:
        resolver = DirectoryDestination(args.output_dir or config.output.default_dir)

    pipeline = GenerationPipeline(config=config, resolver=resolver)
    return _report(pipeline.generate_request(raw_text, args.format))


if __name__ == "__main__":
    sys.exit(main())
