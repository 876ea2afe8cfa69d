"""
生成三种格式的示例文档（用于目视检查排版）。

用法：
  python tools/generate_examples.py --out-dir examples_out
  python tools/generate_examples.py --out-dir examples_out --repeat 20   # 多页PDF
"""

from __future__ import annotations

import argparse
from pathlib import Path

from barcode_grid.config import configure_logging, get_config
from barcode_grid.models import OutputFormat
from barcode_grid.pipeline import FixedDestination, GenerationPipeline

SAMPLE_CODES = [
    "PROD-001",
    "ITEM-A100",
    "SKU-2024-77",
    "BOX-12",
    "PALLET-9",
    "LOT-4410",
    "ASSET-300",
    "BIN-A1",
    "REF-88X",
]


def main() -> None:
    ap = argparse.ArgumentParser()
    ap.add_argument("--out-dir", default=".")
    ap.add_argument("--repeat", type=int, default=1, help="样例列表重复次数")
    args = ap.parse_args()

    config = get_config()
    configure_logging(config)

    out_dir = Path(args.out_dir)
    raw_text = "\n".join(SAMPLE_CODES * max(1, args.repeat))
    pipeline = GenerationPipeline(config=config)

    failed = False
    for fmt in OutputFormat:
        target = out_dir / f"example-barcodes.{fmt.extension}"
        result = pipeline.generate_request(raw_text, fmt, resolver=FixedDestination(target))
        if result.success:
            print(f"{fmt.label}: {target} ({result.page_count} 页)")
        else:
            failed = True
            print(f"{fmt.label}: 失败 {result.error or result.errors}")

    raise SystemExit(1 if failed else 0)


if __name__ == "__main__":
    main()
