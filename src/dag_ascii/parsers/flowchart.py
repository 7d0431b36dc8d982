"""Flowchart parser — hand-rolled recursive descent.

Accepts a small Mermaid-flavoured edge-list syntax::

    graph TD
    %% comments are ignored
    root[Build] --> lint & test
    test --> "unit" --> report

Statements end at a newline or ``;``. Successors keep their declaration
order, which is the order the renderer receives them in.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from dag_ascii.syntax.types import Edge, Graph, Node

# ─── Tokenizer ───────────────────────────────────────────────────────────────

_COMMENT_RE = re.compile(r"%%[^\n]*")
_WHITESPACE_RE = re.compile(r"[ \t]+")
_NEWLINE_RE = re.compile(r"\r\n|\n|\r|;")

_EDGE_TOKENS: tuple[str, ...] = ("-->", "---")

_HEADER_RE = re.compile(r"(?:flowchart|graph)(?:[ \t]+(?:TD|TB|LR|RL|BT))?(?=[ \t\r\n;%]|$)")
_NODE_ID_RE = re.compile(r"[A-Za-z0-9_]+(?:-[A-Za-z0-9_]+)*")
_BARE_LABEL_RE = re.compile(r"[^\]\n]+")


@dataclass
class _Cursor:
    """Stateful parser cursor over the input string."""

    src: str
    pos: int = 0

    def eof(self) -> bool:
        return self.pos >= len(self.src)

    def peek(self, s: str) -> bool:
        return self.src.startswith(s, self.pos)

    def consume(self, s: str) -> bool:
        if self.peek(s):
            self.pos += len(s)
            return True
        return False

    def match_re(self, pattern: re.Pattern[str]) -> str | None:
        m = pattern.match(self.src, self.pos)
        if m:
            self.pos = m.end()
            return m.group(0)
        return None

    def skip_ws(self) -> None:
        while True:
            m = _WHITESPACE_RE.match(self.src, self.pos)
            if m:
                self.pos = m.end()
                continue
            m = _COMMENT_RE.match(self.src, self.pos)
            if m:
                self.pos = m.end()
                continue
            break

    def skip_ws_and_newlines(self) -> None:
        while True:
            self.skip_ws()
            if not self.consume_newline():
                break

    def consume_newline(self) -> bool:
        m = _NEWLINE_RE.match(self.src, self.pos)
        if m:
            self.pos = m.end()
            return True
        return False

    def try_parse_header(self) -> bool:
        saved = self.pos
        self.skip_ws_and_newlines()
        if self.match_re(_HEADER_RE):
            self.skip_ws()
            self.consume_newline()
            return True
        self.pos = saved
        return False

    def parse_quoted_string(self) -> str:
        assert self.src[self.pos] == '"'
        self.pos += 1
        buf: list[str] = []
        while self.pos < len(self.src):
            ch = self.src[self.pos]
            if ch == '"':
                self.pos += 1
                break
            if ch == "\\" and self.pos + 1 < len(self.src):
                buf.append(self.src[self.pos + 1])
                self.pos += 2
            else:
                buf.append(ch)
                self.pos += 1
        # a label is drawn on a single row
        return " ".join("".join(buf).splitlines())

    def parse_node_label(self) -> str:
        self.skip_ws()
        if self.pos < len(self.src) and self.src[self.pos] == '"':
            label = self.parse_quoted_string()
            self.skip_ws()
            return label
        label = self.match_re(_BARE_LABEL_RE)
        return (label or "").strip()

    def parse_node_ref(self) -> Node | None:
        self.skip_ws()
        if self.pos < len(self.src) and self.src[self.pos] == '"':
            text = self.parse_quoted_string()
            return Node.new(text, text)
        node_id = self.match_re(_NODE_ID_RE)
        if not node_id:
            return None
        if self.consume("["):
            label = self.parse_node_label()
            self.consume("]")
            return Node.new(node_id, label)
        return Node.bare(node_id)

    def parse_node_group(self) -> list[Node] | None:
        """Parse ``a`` or ``a & b & c``."""
        first = self.parse_node_ref()
        if first is None:
            return None
        group = [first]
        while True:
            saved = self.pos
            self.skip_ws()
            if not self.consume("&"):
                self.pos = saved
                break
            node = self.parse_node_ref()
            if node is None:
                self.pos = saved
                break
            group.append(node)
        return group

    def parse_edge_connector(self) -> bool:
        self.skip_ws()
        return any(self.consume(token) for token in _EDGE_TOKENS)

    def try_parse_statement(self) -> tuple[list[Node], list[Edge]] | None:
        saved = self.pos
        sources = self.parse_node_group()
        if sources is None:
            self.pos = saved
            return None
        nodes: list[Node] = list(sources)
        edges: list[Edge] = []
        while True:
            mark = self.pos
            if not self.parse_edge_connector():
                self.pos = mark
                break
            targets = self.parse_node_group()
            if targets is None:
                self.pos = mark
                break
            nodes.extend(targets)
            edges.extend(Edge(s.id, t.id) for s in sources for t in targets)
            sources = targets
        return (nodes, edges)

    def parse_graph(self) -> Graph:
        graph = Graph.new()
        self.try_parse_header()

        while not self.eof():
            self.skip_ws()
            if self.eof():
                break
            if self.consume_newline():
                continue
            result = self.try_parse_statement()
            if result is None:
                self.pos += 1
                continue
            stmt_nodes, stmt_edges = result
            for n in stmt_nodes:
                _upsert_node(graph.nodes, n)
            graph.edges.extend(stmt_edges)

        return graph


def _upsert_node(nodes: list[Node], node: Node) -> None:
    """First explicit label wins; a bare reference never overwrites one."""
    for existing in nodes:
        if existing.id == node.id:
            if node.has_label and not existing.has_label:
                existing.label = node.label
                existing.has_label = True
            return
    nodes.append(node)


class FlowchartParser:
    """Flowchart/graph edge-list parser."""

    def parse(self, src: str) -> Graph:
        cursor = _Cursor(src=src)
        return cursor.parse_graph()
