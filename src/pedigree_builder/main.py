"""
Main entry for pedigree_builder.

This module is intentionally thin:
- argument parsing
- configuration setup
- pipeline orchestration

No pedigree logic lives here.
"""

from __future__ import annotations

import argparse

from pedigree_builder.config import get_config
from pedigree_builder.logger import configure_logging, get_logger

from pedigree_builder.core.context import BuildContext
from pedigree_builder.core.pipeline import Pipeline
from pedigree_builder.utils import resolve_project_path

log = get_logger("pedigree_builder.main")

DEFAULT_OUTPUT_NAME = "pedigree.ped"


# ---------------------------------------------------------
# CLI Argument Parsing
# ---------------------------------------------------------
def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Build a renderer-ready pedigree from survey fact records"
    )
    parser.add_argument(
        "-i",
        "--input",
        required=True,
        help="Path to a fact-record export (.json or .csv)",
    )
    parser.add_argument(
        "-o",
        "--output",
        default=None,
        help="Pedigree text output path (default: <outputs_dir>/pedigree.ped)",
    )
    parser.add_argument(
        "--json",
        default=None,
        help="Also write a JSON view of the family members",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug output",
    )
    return parser


# ---------------------------------------------------------
# Pipeline Runner
# ---------------------------------------------------------
def run(input_path: str, output_path: str | None, json_path: str | None, debug_flag: bool) -> None:
    """
    Prepare context and execute the build pipeline.
    """

    cfg = get_config()
    configure_logging(debug=bool(debug_flag))

    if not output_path:
        outputs_dir = cfg.paths.get("outputs_dir", "outputs")
        output_path = str(resolve_project_path(outputs_dir) / DEFAULT_OUTPUT_NAME)

    log.info(f"Loading fact records: {input_path}")

    ctx = BuildContext(
        config=cfg,
        logger=log,
        input_path=input_path,
        output_path=output_path,
        json_path=json_path,
        debug=cfg.debug,
    )

    Pipeline(ctx).run()

    log.info(f"Pedigree complete. Output: {output_path} stats={ctx.stats}")


# ---------------------------------------------------------
# Program Entry Point
# ---------------------------------------------------------
def main() -> None:
    ap = build_arg_parser()
    args = ap.parse_args()

    try:
        run(
            input_path=args.input,
            output_path=args.output,
            json_path=args.json,
            debug_flag=args.debug,
        )
    except Exception as exc:
        log.exception(f"Unhandled exception in main: {exc}")
        raise


if __name__ == "__main__":
    main()
