"""
CSV ingestion for table relationship descriptions.
"""

import csv
import logging
from pathlib import Path
from typing import List, Union

from ..errors import CsvParseError, InputOpenError

_log = logging.getLogger(__name__)

MIN_FIELDS = 3


def read_records(path: Union[str, Path]) -> List[List[str]]:
    """
    Read every data row of a table CSV.

    The first row is a header and is skipped without inspection. Every
    remaining row must have as many fields as the first row of the file,
    and at least ``table_name, foreign_keys_json, relation_size``.

    Args:
        path: Path to the CSV file

    Returns:
        Rows in file order, each a list of strings

    Raises:
        InputOpenError: If the file cannot be opened
        CsvParseError: If a row is malformed
    """
    path = Path(path)
    try:
        f = open(path, "r", encoding="utf-8", newline="")
    except OSError as e:
        raise InputOpenError(f"Failed to open file: {path}: {e}") from e

    records: List[List[str]] = []
    with f:
        reader = csv.reader(f, strict=True)
        try:
            header = next(reader, None)
            if header is None:
                _log.debug("%s is empty, no records read", path)
                return records
            expected = len(header)
            for row in reader:
                if not row:
                    continue
                if len(row) != expected:
                    raise CsvParseError(
                        f"Error trying to read csv {path}: record on line {reader.line_num}: "
                        f"wrong number of fields ({len(row)} != {expected})"
                    )
                if len(row) < MIN_FIELDS:
                    raise CsvParseError(
                        f"Error trying to read csv {path}: record on line {reader.line_num}: "
                        f"expected at least {MIN_FIELDS} fields, got {len(row)}"
                    )
                records.append(row)
        except csv.Error as e:
            raise CsvParseError(
                f"Error trying to read csv {path}: line {reader.line_num}: {e}"
            ) from e
        except UnicodeDecodeError as e:
            raise CsvParseError(f"Error trying to read csv {path}: {e}") from e

    _log.debug("Read %d records from %s", len(records), path)
    return records
