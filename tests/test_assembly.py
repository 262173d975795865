"""
Integration tests for building and writing table graphs.
"""

import json
import re

import pytest

from tablegraph import GraphAssembler, GraphConfig, OutputType
from tablegraph.errors import (
    ConstructionError,
    FieldConversionError,
    InputOpenError,
    JsonParseError,
    OutputCreateError,
)


def _config(input_path, tmp_path, output_type=OutputType.GRAPHVIZ, base="graph"):
    return GraphConfig(
        input_path=input_path,
        output_base=str(tmp_path / base),
        output_type=output_type,
    )


def _d3_payload(page):
    match = re.search(r"const graphData = (.*);\n", page)
    assert match is not None
    return json.loads(match.group(1))


def test_graphviz_scenario(write_csv, orders_rows, tmp_path):
    """Two tables and one foreign key produce two nodes and one edge."""
    assembler = GraphAssembler(_config(write_csv(orders_rows), tmp_path))
    output_path = assembler.run()

    assert output_path == tmp_path / "graph.gv"
    source = output_path.read_text(encoding="utf-8")
    lines = [line.strip() for line in source.splitlines()]
    assert len([line for line in lines if line.startswith(("orders [", "customers ["))]) == 2
    edges = [line for line in lines if "->" in line]
    assert len(edges) == 1
    assert edges[0].startswith("orders -> customers")
    assert "customer_id" in edges[0]


def test_d3_scenario(write_csv, orders_rows, tmp_path):
    assembler = GraphAssembler(_config(write_csv(orders_rows), tmp_path, OutputType.D3))
    output_path = assembler.run()

    assert output_path == tmp_path / "graph.html"
    payload = _d3_payload(output_path.read_text(encoding="utf-8"))
    assert [node["id"] for node in payload["nodes"]] == ["orders", "customers"]
    assert payload["relationships"][0]["source"] == "orders"
    assert payload["relationships"][0]["target"] == "customers"
    assert payload["relationships"][0]["type"] == "customer_id"


def test_node_count_matches_tables(write_csv, tmp_path):
    rows = [
        ["orders", '{"customer_id": "customers", "item_id": "items"}', "1000"],
        ["customers", '{"region_id": "regions"}', "50"],
        ["items", "{}", "200"],
        ["regions", "{}", "4"],
    ]
    assembler = GraphAssembler(_config(write_csv(rows), tmp_path))
    backend = assembler.build()
    assert backend.node_count() == 4
    assert backend.edge_count() == 3


def test_duplicate_foreign_key_diverges_between_backends(write_csv, orders_rows, tmp_path):
    """The DOT graph keeps one edge, the D3 page keeps both entries."""
    rows = orders_rows + [["orders", '{"customer_id": "customers"}', "1000"]]
    path = write_csv(rows)

    dot = GraphAssembler(_config(path, tmp_path)).build()
    d3 = GraphAssembler(_config(path, tmp_path, OutputType.D3)).build()

    assert dot.edge_count() == 1
    assert d3.edge_count() == 2


def test_edges_to_same_table_through_two_columns(write_csv, tmp_path):
    rows = [
        ["orders", '{"customer_id": "customers", "billing_customer_id": "customers"}', "10"],
        ["customers", "{}", "5"],
    ]
    backend = GraphAssembler(_config(write_csv(rows), tmp_path)).build()
    assert backend.edge_count() == 1
    assert backend.graph.edges["orders", "customers"]["comment"] == "customer_id"


def test_repeat_runs_are_byte_identical(write_csv, tmp_path):
    rows = [
        ["orders", '{"customer_id": "customers", "item_id": "items"}', "1000"],
        ["items", '{"vendor_id": "vendors"}', "300"],
        ["customers", "{}", "50"],
        ["vendors", "{}", "0"],
    ]
    path = write_csv(rows)
    for output_type in OutputType:
        first = GraphAssembler(_config(path, tmp_path, output_type, "first")).run()
        second = GraphAssembler(_config(path, tmp_path, output_type, "second")).run()
        assert first.read_bytes() == second.read_bytes()


def test_malformed_json_leaves_no_output(write_csv, tmp_path):
    rows = [
        ["orders", '{"customer_id": ', "1000"],
        ["customers", "{}", "50"],
    ]
    assembler = GraphAssembler(_config(write_csv(rows), tmp_path))
    with pytest.raises(JsonParseError) as exc_info:
        assembler.run()
    assert "orders" in str(exc_info.value)
    assert not (tmp_path / "graph.gv").exists()


def test_non_object_json(write_csv, tmp_path):
    rows = [["orders", '["customers"]', "1000"]]
    with pytest.raises(JsonParseError):
        GraphAssembler(_config(write_csv(rows), tmp_path)).build()


def test_bad_relation_size(write_csv, tmp_path):
    rows = [["orders", "{}", "lots"]]
    with pytest.raises(FieldConversionError) as exc_info:
        GraphAssembler(_config(write_csv(rows), tmp_path)).run()
    assert "orders" in str(exc_info.value)
    assert "lots" in str(exc_info.value)
    assert not (tmp_path / "graph.gv").exists()


def test_negative_relation_size(write_csv, tmp_path):
    rows = [["orders", "{}", "-5"]]
    with pytest.raises(FieldConversionError):
        GraphAssembler(_config(write_csv(rows), tmp_path)).build()


def test_reference_to_unknown_table(write_csv, tmp_path):
    rows = [["orders", '{"payment_id": "payments"}', "10"]]
    with pytest.raises(ConstructionError) as exc_info:
        GraphAssembler(_config(write_csv(rows), tmp_path)).build()
    message = str(exc_info.value)
    assert "orders" in message
    assert "payment_id" in message


def test_missing_input(tmp_path):
    with pytest.raises(InputOpenError):
        GraphAssembler(_config(tmp_path / "nope.csv", tmp_path)).run()


def test_progress_is_logged(write_csv, orders_rows, tmp_path, caplog):
    with caplog.at_level("INFO"):
        GraphAssembler(_config(write_csv(orders_rows), tmp_path)).run()
    assert "Adding vertex: orders with weight: 1000" in caplog.text
    assert "Adding edge from: orders to: customers with fk col: customer_id" in caplog.text


def test_null_foreign_keys_mean_no_edges(write_csv, orders_rows, tmp_path):
    rows = orders_rows + [["regions", "null", "10"]]
    backend = GraphAssembler(_config(write_csv(rows), tmp_path)).build()
    assert backend.node_count() == 3
    assert backend.edge_count() == 1


def test_sizes_are_checked_before_foreign_keys(write_csv, tmp_path):
    """A bad size on a later row wins over bad JSON on an earlier row."""
    rows = [
        ["orders", "{bad", "10"],
        ["customers", "{}", "lots"],
    ]
    with pytest.raises(FieldConversionError) as exc_info:
        GraphAssembler(_config(write_csv(rows), tmp_path)).build()
    assert "customers" in str(exc_info.value)


def test_edges_of_a_row_are_added_before_next_row_is_decoded(write_csv, tmp_path):
    rows = [
        ["orders", '{"payment_id": "payments"}', "10"],
        ["customers", "{bad", "5"],
    ]
    with pytest.raises(ConstructionError) as exc_info:
        GraphAssembler(_config(write_csv(rows), tmp_path)).build()
    assert "payments" in str(exc_info.value)


@pytest.mark.parametrize("relation_size", [" 10 ", "1_000", "10.0", ""])
def test_relation_size_must_be_a_plain_integer(write_csv, tmp_path, relation_size):
    rows = [["orders", "{}", relation_size]]
    with pytest.raises(FieldConversionError):
        GraphAssembler(_config(write_csv(rows), tmp_path)).build()


def test_signed_relation_size(write_csv, tmp_path):
    rows = [["orders", "{}", "+5"]]
    backend = GraphAssembler(_config(write_csv(rows), tmp_path)).build()
    assert backend.graph.nodes["orders"]["weight"] == 5


def test_output_directory_missing(write_csv, orders_rows, tmp_path):
    config = GraphConfig(
        input_path=write_csv(orders_rows),
        output_base=str(tmp_path / "missing" / "graph"),
    )
    with pytest.raises(OutputCreateError) as exc_info:
        GraphAssembler(config).run()
    assert "Error creating outfile" in str(exc_info.value)
    assert not (tmp_path / "missing").exists()
