from __future__ import annotations

from pedigree_builder.core.context import BuildContext
from pedigree_builder.core.exceptions import PipelineError
from pedigree_builder.exporter import export_family_json, write_pedigree
from pedigree_builder.family.builder import PedigreeBuilder, PedigreeResult
from pedigree_builder.records import load_fact_records


class Pipeline:
    """
    Orchestrates load -> build -> write for one respondent export.
    No pedigree logic lives here.
    """

    def __init__(self, context: BuildContext):
        self.ctx = context
        self.log = context.logger

    def run(self) -> PedigreeResult:
        self.log.info("Pipeline starting")
        if self.ctx.debug:
            self.log.debug("Debug output enabled (input=%s)", self.ctx.input_path)

        try:
            records = load_fact_records(self.ctx.input_path)

            builder = PedigreeBuilder()
            builder.add_records(records)
            result = builder.build()

            write_pedigree(result.document, self.ctx.output_path)
            if self.ctx.json_path:
                export_family_json(result.family, self.ctx.json_path)

            self.ctx.stats.update(
                {
                    "records": len(records),
                    "skipped": len(result.skipped_steps),
                    "members": len(result.family),
                    "has_multiple_cancers": result.has_multiple_cancers,
                }
            )
            self.log.info("Pipeline completed successfully")

            return result

        except Exception as exc:
            self.log.exception("Pipeline execution failed")
            raise PipelineError(str(exc)) from exc
