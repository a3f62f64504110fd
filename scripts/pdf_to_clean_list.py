#!/usr/bin/env python3
"""Convert a PDF list (one entry per line) to text and write its clean, de-duplicated entries."""

from __future__ import annotations

import sys
import time
from pathlib import Path

# Add repo root so scriptutils is importable
REPO_ROOT = Path(__file__).resolve().parent.parent
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))


def main() -> int:
    if len(sys.argv) < 2:
        print("Usage: python scripts/pdf_to_clean_list.py path/to/list.pdf [out.txt]", file=sys.stderr)
        return 1

    from scriptutils import (
        ConversionIncomplete,
        FallbackFailure,
        Style,
        extract_text,
        get_default_reporter,
        normalize_lines,
        time_diff,
    )

    reporter = get_default_reporter()
    started = time.time() * 1000
    pdf_path = sys.argv[1]
    try:
        txt_path = extract_text(pdf_path, reporter=reporter)
    except (FallbackFailure, ConversionIncomplete) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    entries = normalize_lines(Path(txt_path).read_text(encoding="utf-8-sig", errors="replace"))
    out = Path(sys.argv[2]) if len(sys.argv) > 2 else Path(txt_path).with_name(Path(txt_path).stem + "_clean.txt")
    out.write_text("\n".join(entries) + "\n", encoding="utf-8")

    reporter.report_many([
        (f"entries: {len(entries)}", Style.GREEN),
        (f"written: {out}", Style.WHITE),
        (f"elapsed: {time_diff(started, time.time() * 1000)}", Style.DIM),
    ])
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
