"""
PDF页数统计（核对生成的条码PDF页数）。

用法：
  python tools/pdf_page_count.py --pdf output/barcode_2024-03-05_14-07-09.pdf
"""

from __future__ import annotations

import argparse
from pathlib import Path

from barcode_grid.doc_gen import count_pdf_pages


def main() -> None:
    ap = argparse.ArgumentParser()
    ap.add_argument("--pdf", required=True)
    args = ap.parse_args()
    print(count_pdf_pages(Path(args.pdf)))


if __name__ == "__main__":
    main()
