# tests/test_traversal.py

from __future__ import annotations

import io
import logging

import pytest

from gedcom_chart.chart import ChartBuilder, ChartOptions, MarriagePlacement, NodeEmitter, render_chart
from gedcom_chart.core.exceptions import RecordNotFoundError, UsageError
from gedcom_chart.graph import Family, Individual, RecordGraph

JOHN = (
    "g[id=I1]{\n"
    "\tmale,\n"
    "\tname = {John \\nick{Jack} \\surn{Smith}},\n"
    "\tbirth = {1900-03-15}{Springfield},\n"
    "\tdeath- = {1970},\n"
    "\tprofession = {Farmer \\& Smith},\n"
    "}\n"
)


def _indent(block: str, depth: int) -> str:
    return "".join("\t" * depth + line for line in block.splitlines(keepends=True))


def _balanced(text: str) -> bool:
    depth = 0
    for ch in text:
        if ch == "{":
            depth += 1
        elif ch == "}":
            depth -= 1
            if depth < 0:
                return False
    return depth == 0


def test_parent_chart_two_generations(family_graph):
    text = render_chart(family_graph, "I1", ancestors=2)

    assert text == (
        "parent[id=F1, family database={marriage = {1899-06-10}{Springfield}}]{\n"
        + _indent(JOHN, 1)
        + "\tp[id=I2]{\n"
        "\t\tmale,\n"
        "\t\tname = {William \\surn{Smith}},\n"
        "\t\tbirth- = {(caAD)1870},\n"
        "\t}\n"
        "\tp[id=I3]{\n"
        "\t\tfemale,\n"
        "\t\tname = {Mary \\surn{Jones}},\n"
        "\t\tbirth = {/1875}{Springfield},\n"
        "\t}\n"
        "}\n"
    )


def test_parent_chart_three_generations_nests_parent_nodes(family_graph):
    text = render_chart(family_graph, "I1", ancestors=3)

    assert "\tparent[id=F4]{\n\t\tg[id=I2]{\n" in text
    assert "\t\tp[id=I4]{\n" in text
    # Mary has no recorded parents, so her container holds only her own block
    assert "\tparent{\n\t\tg[id=I3]{\n" in text
    assert _balanced(text)


def test_one_generation_is_just_the_proband(family_graph):
    text = render_chart(family_graph, "I1", ancestors=1)
    assert text.startswith("parent[id=F1")
    assert "p[id=I2]" not in text


def test_child_chart_with_second_union(family_graph):
    text = render_chart(family_graph, "I1", descendants=2)

    assert text == (
        "child[id=F2, family database={marriage- = {1925-05-01}}]{\n"
        + _indent(JOHN, 1)
        + "\tp[id=I5]{\n"
        "\t\tfemale,\n"
        "\t\tname = {Anna \\surn{Brown}},\n"
        "\t}\n"
        "\tc[id=I6]{\n"
        "\t\tmale,\n"
        "\t\tname = {Robert \\surn{Smith}},\n"
        "\t\tbirth+ = {1925-01-01}{}{out of wedlock},\n"
        "\t}\n"
        "\tunion[id=F3]{\n"
        "\t\tp[id=I7]{\n"
        "\t\t\tfemale,\n"
        "\t\t\tname = {Clara \\surn{White}},\n"
        "\t\t}\n"
        "\t\tc[id=I8]{\n"
        "\t\t\tfemale,\n"
        "\t\t\tname = {Baby \\surn{Smith}},\n"
        "\t\t\tbirth+ = {1940-02-02}{}{stillborn},\n"
        "\t\t\tdeath- = {1940-02-02},\n"
        "\t\t}\n"
        "\t}\n"
        "}\n"
    )


@pytest.mark.parametrize(
    "ancestors, descendants",
    [(a, d) for a in range(5) for d in range(5) if (a, d) != (0, 0)],
)
def test_blocks_close_at_their_opening_depth(family_graph, ancestors, descendants):
    text = render_chart(family_graph, "I1", ancestors=ancestors, descendants=descendants)
    assert text

    open_depths = []
    for line in text.splitlines():
        depth = len(line) - len(line.lstrip("\t"))
        if line.endswith("{"):
            open_depths.append(depth)
        elif line.strip() == "}":
            assert open_depths, f"unmatched close at depth {depth}"
            assert open_depths.pop() == depth
    assert open_depths == []


def test_sandclock_chart(family_graph):
    text = render_chart(family_graph, "I1", ancestors=2, descendants=2)
    lines = text.splitlines()

    assert lines[0].startswith("sandclock[id=F1, family database=")
    assert lines[1] == "\tp[id=I2]{"
    assert "\tchild[id=F2, family database={marriage- = {1925-05-01}}]{" in lines
    assert "\t\tg[id=I1]{" in lines
    assert "\t\tunion[id=F3]{" in lines
    assert lines[-2:] == ["\t}", "}"]
    assert _balanced(text)


def test_non_family_placement_leaves_options_bare(family_graph):
    options = ChartOptions(marriage=MarriagePlacement.SPOUSE)
    text = render_chart(family_graph, "I1", descendants=2, options=options)
    assert text.startswith("child[id=F2]{\n")
    assert "\t\tmarriage- = {1925-05-01},\n" in text


def test_ignored_family_prunes_union(family_graph):
    options = ChartOptions.build(ignore=["F3"])
    text = render_chart(family_graph, "I1", descendants=2, options=options)
    assert "union" not in text
    assert "I7" not in text
    assert "I8" not in text
    # The other family of the same person is untouched
    assert "\tp[id=I5]{\n" in text
    assert "\tc[id=I6]{\n" in text


def test_ignored_first_family_promotes_the_next_one(family_graph):
    options = ChartOptions.build(ignore=["F2"])
    text = render_chart(family_graph, "I1", descendants=2, options=options)

    assert text.startswith("child[id=F3]{\n\tg[id=I1]{\n")
    assert "\tp[id=I7]{\n" in text
    assert "\tc[id=I8]{\n" in text
    assert "union" not in text
    assert "I5" not in text
    assert "I6" not in text


def test_ignored_parent_is_left_out(family_graph):
    options = ChartOptions.build(ignore=["@I3@"])
    text = render_chart(family_graph, "I1", ancestors=3, options=options)
    assert "I2" in text
    assert "I3" not in text


def test_ignored_proband_gives_no_output(family_graph, chart_log):
    options = ChartOptions.build(ignore=["I1"])
    assert render_chart(family_graph, "I1", ancestors=2, options=options) == ""
    assert any("ignore" in m for m in chart_log.messages(logging.WARNING))


@pytest.mark.parametrize("ancestors, descendants", [(0, 0), (-1, 2), (2, -1)])
def test_bad_counts_raise_before_output(family_graph, ancestors, descendants):
    buffer = io.StringIO()
    builder = ChartBuilder(family_graph, NodeEmitter(buffer), ChartOptions())
    with pytest.raises(UsageError):
        builder.build("I1", ancestors, descendants)
    assert buffer.getvalue() == ""


def test_unknown_proband_raises(family_graph):
    with pytest.raises(RecordNotFoundError):
        render_chart(family_graph, "I404", ancestors=2)


def test_debug_trace_lines_are_indented(family_graph, chart_log):
    render_chart(family_graph, "I1", ancestors=2)
    debug = [r for r in chart_log.records if r.levelno == logging.DEBUG]
    messages = [r.getMessage() for r in debug]

    assert "Proband: John \"Jack\" /Smith/ (I1)" in messages
    assert "Father: William /Smith/ (I2)" in messages
    assert "Mother: Mary /Jones/ (I3)" in messages
    father = next(r for r in debug if r.getMessage().startswith("Father"))
    assert father.indent == 1


def test_circular_links_are_cut(chart_log):
    graph = RecordGraph()
    graph.register_individual(Individual(xref="@I1@", famc="@F1@", fams=["@F1@"]))
    graph.register_family(Family(xref="@F1@", husband="@I1@", children=["@I1@"]))

    text = render_chart(graph, "I1", ancestors=4, descendants=4)

    assert _balanced(text)
    assert chart_log.messages(logging.WARNING)
