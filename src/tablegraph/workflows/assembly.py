from __future__ import annotations

import io
import logging
from pathlib import Path
from typing import List, Optional

from ..errors import ConstructionError, OutputCreateError
from ..ingestion import read_records
from ..schema import GraphConfig, TableRecord
from ..visualization.backends import GraphBackend, create_backend

_log = logging.getLogger(__name__)


class GraphAssembler:
    """Builds a foreign key graph from a table CSV and writes it to disk.

    All rows are read before the graph is touched, then two passes run over
    them. The node pass converts each relation size and adds the table; the
    edge pass decodes each foreign key blob and adds its edges right away.
    Every table therefore exists before any edge points at it, and the first
    bad value met in that order is the one reported.
    """

    def __init__(self, config: Optional[GraphConfig] = None, backend: Optional[GraphBackend] = None):
        self.config = config or GraphConfig()
        self.backend = backend or create_backend(self.config.output_type, title=self.config.title)

    def load_rows(self) -> List[List[str]]:
        return read_records(self.config.input_path)

    def add_nodes(self, rows: List[List[str]]) -> List[TableRecord]:
        records = []
        for row in rows:
            record = TableRecord.from_row(row)
            _log.info("Adding vertex: %s with weight: %d", record.name, record.row_count)
            try:
                self.backend.add_node(record.name, record.row_count)
            except ConstructionError as e:
                raise ConstructionError(f"Error adding vertex: {record.name}, err: {e}") from e
            records.append(record)
        return records

    def add_edges(self, rows: List[List[str]], records: List[TableRecord]) -> List[TableRecord]:
        linked = []
        for row, record in zip(rows, records):
            record = record.with_foreign_keys(row[1])
            for fk_col, fk_table in record.foreign_keys.items():
                _log.info(
                    "Adding edge from: %s to: %s with fk col: %s",
                    record.name, fk_table, fk_col,
                )
                try:
                    self.backend.add_edge(record.name, fk_table, fk_col)
                except ConstructionError as e:
                    raise ConstructionError(
                        f"Error adding edge from: {record.name} to: {fk_table} "
                        f"with fk col: {fk_col}, err: {e}"
                    ) from e
            linked.append(record)
        return linked

    def build(self) -> GraphBackend:
        """Read the input and populate the backend."""
        rows = self.load_rows()
        records = self.add_nodes(rows)
        self.add_edges(rows, records)
        return self.backend

    def render(self) -> Path:
        """Serialize the backend into ``output_base`` plus the backend extension."""
        buffer = io.StringIO()
        self.backend.render(buffer)

        output_path = self.config.output_path(self.backend.extension)
        try:
            with open(output_path, "w", encoding="utf-8") as f:
                f.write(buffer.getvalue())
        except OSError as e:
            raise OutputCreateError(f"Error creating outfile: {output_path}: {e}") from e
        return output_path

    def run(self) -> Path:
        self.build()
        output_path = self.render()
        _log.info(
            "Wrote %s (%d nodes, %d edges)",
            output_path, self.backend.node_count(), self.backend.edge_count(),
        )
        return output_path
