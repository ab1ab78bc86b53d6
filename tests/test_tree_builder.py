# tests/test_tree_builder.py

from __future__ import annotations

from gedcom_chart.graph import build_graph
from gedcom_chart.loader import GEDCOMTree, build_tree, tokenize_file, tokenize_lines
from gedcom_chart.utils import tests_data_path


def _tree(**kwargs) -> GEDCOMTree:
    return build_tree(tokenize_file(tests_data_path("family.ged")), **kwargs)


def _mary(tree: GEDCOMTree):
    return next(n for n in tree.find_records_by_tag("INDI") if n.pointer == "@I3@")


def test_build_tree_returns_gedcom_tree_instance() -> None:
    tree = _tree()
    assert isinstance(tree, GEDCOMTree)
    assert tree.records[0].tag == "HEAD"


def test_tree_records_by_tag() -> None:
    tree = _tree()
    assert len(tree.find_records_by_tag("INDI")) == 8
    assert len(tree.find_records_by_tag("fam")) == 4
    assert tree.find_records_by_tag("") == []
    assert tree.find_records_by_tag("SOUR") == []


def test_graph_is_built_from_tag_index() -> None:
    tree = build_tree(
        tokenize_lines(["0 HEAD", "0 @F1@ FAM", "1 HUSB @I1@", "0 @I1@ INDI", "1 NAME A /B/", "0 TRLR"])
    )
    graph = build_graph(tree)
    assert list(graph.individuals) == ["@I1@"]
    assert list(graph.families) == ["@F1@"]
    # FAM before INDI in the file: the link is still made
    assert graph.get_individual("I1").fams == ["@F1@"]


def test_build_tree_folds_conc() -> None:
    assert _mary(_tree()).find_first("BIRT").child_value("PLAC") == "Springfield, Illinois"


def test_build_tree_can_skip_reconstruction() -> None:
    place = _mary(_tree(reconstruct=False)).find_first("BIRT").find_first("PLAC")
    assert place.value == "Spring"
    assert place.find_first("CONC") is not None
