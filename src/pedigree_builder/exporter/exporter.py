"""
exporter.py
File output for pedigree documents.

    write_pedigree(document, output_path)

The document is written byte-for-byte as produced by pedigree_writer:
UTF-8, "\n" line endings, no trailing additions.
"""

from __future__ import annotations

from pathlib import Path

from pedigree_builder.logger import get_logger

log = get_logger(__name__)


def write_pedigree(document: str, output_path: str | Path) -> Path:
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)

    rows = max(document.count("\n") - 1, 0)
    log.info("Writing pedigree to: %s (rows=%d)", output_path, rows)

    # newline="" keeps "\n" as-is on every platform
    with output_path.open("w", encoding="utf-8", newline="") as f:
        f.write(document)

    size_bytes = output_path.stat().st_size
    log.info("Pedigree export complete. size=%d bytes", size_bytes)
    return output_path
