"""
Shared fixtures for tablegraph tests.
"""

import csv

import pytest

HEADER = ["table_name", "foreign_keys", "relation_size"]


@pytest.fixture
def write_csv(tmp_path):
    """Write rows under the standard header and return the file path."""
    def _write(rows, name="tables.csv", header=HEADER):
        path = tmp_path / name
        with open(path, "w", encoding="utf-8", newline="") as f:
            writer = csv.writer(f)
            if header is not None:
                writer.writerow(header)
            writer.writerows(rows)
        return path
    return _write


@pytest.fixture
def orders_rows():
    return [
        ["orders", '{"customer_id": "customers"}', "1000"],
        ["customers", "{}", "50"],
    ]
