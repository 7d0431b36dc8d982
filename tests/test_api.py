"""Tests for the public API — draw_dag and render_dsl."""

import pytest

from dag_ascii import GraphIR, RenderConfig, TreeNode, draw_dag, render_dsl


def test_render_dsl_reference_graph():
    src = "10 --> 12 & 121\n12 --> 15\n121 --> 13 & 14\n"
    assert render_dsl(src) == "10\n├───────┐\n121     12\n├───┐   │\n14  13  15"


def test_render_dsl_uses_labels():
    assert render_dsl("a[Start] --> b[Stop]") == "Start\n│\nStop"


def test_render_dsl_ascii_and_spacing():
    config = RenderConfig(unicode=False, spacing=0)
    assert render_dsl("r --> a & b", config) == "r\n+-+\nb a"


def test_render_dsl_empty():
    assert render_dsl("") == ""
    assert render_dsl("graph TD\n%% nothing here\n") == ""


def test_render_dsl_rejects_cycle():
    with pytest.raises(ValueError, match="cycle"):
        render_dsl("a --> b --> a")


def test_render_dsl_rejects_ambiguous_root():
    with pytest.raises(ValueError, match="root nodes"):
        render_dsl("a --> b\nc --> d")


def test_render_dsl_explicit_root():
    assert render_dsl("a --> b\nc --> d", RenderConfig(root="c")) == "c\n│\nd"


def test_render_dsl_shared_child():
    assert render_dsl("r --> y & x\nx --> s\ny --> s") == "r\n├──┐\nx  y\n│  │\ns  s"


def test_draw_dag_graph_view_matches_tree():
    gir = GraphIR.from_edges([("1", "2")])
    assert draw_dag(gir.root()) == draw_dag(TreeNode("1", [TreeNode("2")]))


def test_draw_dag_negative_spacing():
    with pytest.raises(ValueError):
        draw_dag(TreeNode("x"), -2)


def test_render_dsl_multiline_quoted_label_stays_on_one_row():
    assert render_dsl('a["x\ny"] --> b') == "x y\n│\nb"


def test_render_dsl_ignores_cycle_unreachable_from_root():
    src = "a --> b\nc --> d --> c\nr --> c"
    assert render_dsl(src, RenderConfig(root="a")) == "a\n│\nb"


def test_render_dsl_rejects_cycle_below_explicit_root():
    with pytest.raises(ValueError, match="cycle reachable from 'r'"):
        render_dsl("a --> b\nr --> c --> d --> c", RenderConfig(root="r"))
