from __future__ import annotations

import sys

from gedcom_chart.chart.emitter import NodeEmitter
from gedcom_chart.chart.traversal import ChartBuilder
from gedcom_chart.core.context import ChartContext
from gedcom_chart.core.exceptions import ChartError, ChartExecutionError
from gedcom_chart.parser_core import GEDCOMParser


class ChartPipeline:
    """
    Orchestrates one chart run: load the GEDCOM file, then walk and emit.
    No chart logic lives here.
    """

    def __init__(self, context: ChartContext):
        self.ctx = context
        self.log = context.logger

    def run(self):
        self.log.debug("Loading GEDCOM: %s", self.ctx.input_path)

        try:
            parser = GEDCOMParser(config=self.ctx.config)
            graph = parser.run(self.ctx.input_path)

            self.log.debug("Looking for %s in %s", self.ctx.proband, self.ctx.input_path)

            stream = self.ctx.output if self.ctx.output is not None else sys.stdout
            builder = ChartBuilder(graph, NodeEmitter(stream), self.ctx.options)
            builder.build(self.ctx.proband, self.ctx.ancestors, self.ctx.descendants)

            return graph

        except ChartError:
            raise
        except Exception as exc:
            self.log.exception("Chart pipeline failed")
            raise ChartExecutionError(str(exc)) from exc
