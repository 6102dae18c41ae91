"""
Loads graphs from DOT style description files.

Each meaningful line names one or two quoted nodes and optionally a weight:

    "Union South" -> "Computer Sciences and Statistics" [seconds=176.0];

The first quoted string is the predecessor, the second the successor, and the
number between ``=`` and ``]`` is the edge weight. A line with a single quoted
name only adds that node. Lines without quotes (``digraph {``, ``}``) are
ignored.
"""

import logging
import re
from pathlib import Path
from typing import List, NamedTuple, Optional, Union

from .errors import GraphLoadError
from .graph import Graph

logger = logging.getLogger(__name__)

_QUOTED = re.compile(r'"([^"]*)"')
_WEIGHT = re.compile(r"=\s*([^\]]*?)\s*\]")


class ParsedLine(NamedTuple):
    predecessor: Optional[str]
    successor: Optional[str]
    weight: Optional[float]


def parse_line(line: str) -> ParsedLine:
    """
    Splits one line of a description file into its parts.

    Raises:
        GraphLoadError: If the weight is not a number, or a weight is given
            without two node names.
    """
    names = _QUOTED.findall(line)
    predecessor = names[0] if names and names[0] else None
    successor = names[1] if len(names) > 1 and names[1] else None

    weight: Optional[float] = None
    # Search after the names so that '=' or ']' inside quotes is not matched.
    match = _WEIGHT.search(line[line.rfind('"') + 1:]) if names else None
    if match is not None:
        try:
            weight = float(match.group(1))
        except ValueError:
            raise GraphLoadError(f"Invalid edge weight {match.group(1)!r} in line: {line.strip()}") from None
        if predecessor is None or successor is None:
            raise GraphLoadError(f"Edge weight without two nodes in line: {line.strip()}")

    return ParsedLine(predecessor, successor, weight)


def _insert(graph: Graph, parsed: ParsedLine) -> None:
    """Inserts the nodes and edge of one parsed line, skipping known nodes."""
    for name in (parsed.predecessor, parsed.successor):
        if name is not None and not graph.contains_node(name):
            graph.insert_node(name)
    if parsed.weight is not None:
        graph.insert_edge(parsed.predecessor, parsed.successor, parsed.weight)


def load_graph_data(graph: Graph, filename: Union[str, Path]) -> Graph:
    """
    Replaces the contents of graph with the graph described in filename.

    Args:
        graph: The graph to fill. Existing nodes and edges are removed once
            the whole file has been read and parsed; on error it is unchanged.
        filename: Path of the description file.

    Returns:
        The same graph, for chaining.

    Raises:
        GraphLoadError: If the file cannot be read or a line cannot be parsed.
    """
    path = Path(filename)
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as e:
        raise GraphLoadError(f"There was a problem loading the file: {path}") from e

    parsed_lines: List[ParsedLine] = []
    for number, line in enumerate(text.splitlines(), start=1):
        try:
            parsed_lines.append(parse_line(line))
        except GraphLoadError as e:
            raise GraphLoadError(f"{path}:{number}: {e}") from e

    # The graph is only touched once the whole file has parsed.
    graph.clear()
    for parsed in parsed_lines:
        _insert(graph, parsed)

    logger.info(
        "Loaded %d node(s) and %d edge(s) from %s",
        graph.get_node_count(), graph.get_edge_count(), path,
    )
    return graph
