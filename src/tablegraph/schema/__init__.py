"""
Base schema definitions for the project.
"""

import json
import re
from enum import Enum
from pathlib import Path
from typing import Any, Dict, List, Sequence

from pydantic import BaseModel, ConfigDict, Field

from ..errors import CsvParseError, FieldConversionError, JsonParseError


DEFAULT_TITLE = "Table relationships"


class OutputType(str, Enum):
    GRAPHVIZ = "graphviz"
    D3 = "d3"


# Same grammar as a base 10 integer with optional sign, no spaces or underscores.
_INTEGER = re.compile(r"[+-]?[0-9]+")


class TableRecord(BaseModel):
    """One table of the input CSV with its outgoing foreign keys."""
    model_config = ConfigDict(frozen=True)

    name: str = Field(..., min_length=1, description="Table name")
    foreign_keys: Dict[str, str] = Field(
        default_factory=dict, description="Foreign key column -> referenced table"
    )
    row_count: int = Field(0, ge=0, description="Number of rows in the table")

    @classmethod
    def from_row(cls, row: Sequence[str]) -> "TableRecord":
        """
        Convert the name and relation size of a raw
        ``[table_name, foreign_keys_json, relation_size]`` row.

        The foreign key column is left untouched; see ``with_foreign_keys``.

        Raises:
            CsvParseError: If the row has fewer than three fields or no name
            FieldConversionError: If relation_size is not an integer >= 0
        """
        if len(row) < 3:
            raise CsvParseError(f"Expected 3 fields per row, got {len(row)}: {list(row)}")
        name, relation_size = row[0], row[2]
        if not name:
            raise CsvParseError(f"Empty table name in row: {list(row)}")
        return cls(name=name, row_count=parse_row_count(name, relation_size))

    def with_foreign_keys(self, blob: str) -> "TableRecord":
        """Return a copy carrying the decoded foreign key JSON."""
        return self.model_copy(update={"foreign_keys": parse_foreign_keys(self.name, blob)})


def parse_row_count(table_name: str, text: str) -> int:
    if not _INTEGER.fullmatch(text):
        raise FieldConversionError(
            f"Error converting relation_size to integer for table: {table_name}: "
            f"{text!r}, err: invalid syntax"
        )
    row_count = int(text)
    if row_count < 0:
        raise FieldConversionError(
            f"Negative relation_size for table: {table_name}: {text!r}"
        )
    return row_count


def parse_foreign_keys(table_name: str, blob: str) -> Dict[str, str]:
    """Decode the foreign key JSON of ``table_name``, keeping key order.

    A JSON ``null`` means the table has no foreign keys.
    """
    try:
        fks = json.loads(blob)
    except json.JSONDecodeError as e:
        raise JsonParseError(
            f"Error deserializing fks json for table: {table_name}, err: {e}"
        ) from e
    if fks is None:
        return {}
    if not isinstance(fks, dict) or not all(
        isinstance(col, str) and isinstance(target, str) for col, target in fks.items()
    ):
        raise JsonParseError(
            f"Error deserializing fks json for table: {table_name}, "
            f"err: expected an object of column -> table strings, got {blob!r}"
        )
    return fks


class GraphConfig(BaseModel):
    """Run configuration for a single graph build."""
    model_config = ConfigDict(frozen=True)

    input_path: Path = Path("tables.csv")
    output_base: str = Field("graph", min_length=1)
    output_type: OutputType = OutputType.GRAPHVIZ
    title: str = DEFAULT_TITLE

    def output_path(self, extension: str) -> Path:
        return Path(self.output_base + extension)


class D3Node(BaseModel):
    """Node entry of the D3 payload."""
    id: str
    labels: List[str]
    properties: Dict[str, Any] = Field(default_factory=dict)
    nodeRadius: int = 0


class D3Relationship(BaseModel):
    """Relationship entry of the D3 payload."""
    id: str
    type: str
    source: str
    target: str
    labels: List[str]
    properties: Dict[str, Any] = Field(default_factory=dict)
