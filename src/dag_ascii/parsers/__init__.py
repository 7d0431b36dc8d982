"""Parser registry — detect the input type and dispatch to the right parser."""

from __future__ import annotations

import re

from dag_ascii.parsers.base import Parser
from dag_ascii.parsers.flowchart import FlowchartParser
from dag_ascii.syntax.types import Graph


_HEADER_TOKEN_RE = re.compile(r"[A-Za-z0-9_-]+")

_OTHER_DIAGRAMS: frozenset[str] = frozenset(
    {
        "sequenceDiagram",
        "classDiagram",
        "stateDiagram",
        "stateDiagram-v2",
        "erDiagram",
        "journey",
        "gantt",
        "pie",
        "gitGraph",
        "mindmap",
        "timeline",
        "quadrantChart",
        "requirementDiagram",
    }
)


def detect_type(src: str) -> str:
    """Detect the input type from source text. Returns 'flowchart' etc.

    Header-less edge lists are flowcharts. A line opening with another
    Mermaid diagram keyword returns that keyword.
    """
    for line in src.strip().split("\n"):
        line = line.strip()
        if not line or line.startswith("%%"):
            continue
        m = _HEADER_TOKEN_RE.match(line)
        token = m.group(0) if m else ""
        if token.lower() in ("flowchart", "graph"):
            return "flowchart"
        if token in _OTHER_DIAGRAMS and "--" not in line:
            return token
        break
    return "flowchart"  # default


_PARSERS: dict[str, type[Parser]] = {
    "flowchart": FlowchartParser,
}


def parse(src: str) -> Graph:
    """Auto-detect the input type and parse to AST."""
    diagram_type = detect_type(src)
    parser_cls = _PARSERS.get(diagram_type)
    if parser_cls is None:
        raise ValueError(f"Unsupported diagram type: {diagram_type}")
    return parser_cls().parse(src)
