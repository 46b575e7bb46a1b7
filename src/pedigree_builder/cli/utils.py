
from __future__ import annotations

import time
from pathlib import Path

from rich.console import Console

from pedigree_builder.family.builder import PedigreeBuilder, PedigreeResult
from pedigree_builder.records import load_fact_records

console = Console()


def load_pedigree(path: Path, *, verbose: bool = False) -> PedigreeResult:
    """
    Load a fact-record export and build its pedigree.
    """
    if not path.exists():
        raise FileNotFoundError(path)

    t0 = time.perf_counter()

    records = load_fact_records(path)
    result = PedigreeBuilder().add_records(records).build()

    elapsed = time.perf_counter() - t0

    if verbose:
        console.log(
            f"Built pedigree from {len(records)} records "
            f"({len(result.skipped_steps)} skipped) in {elapsed:.3f}s"
        )

    return result


def write_text(payload: str, *, out: Path | None):
    """
    Write text to stdout or file.
    """
    if out:
        out.parent.mkdir(parents=True, exist_ok=True)
        with out.open("w", encoding="utf-8", newline="") as f:
            f.write(payload)
    else:
        # Plain stdout; rich markup would mangle the tab-delimited rows
        print(payload, end="")
