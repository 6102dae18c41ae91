from typing import Hashable, Optional, Sequence

import matplotlib.pyplot as plt
import networkx as nx

from .graph import Graph


def to_networkx(graph: Graph) -> nx.DiGraph:
    """
    Converts a Graph into a networkx DiGraph. Edge weights are stored in the
    ``weight`` attribute.
    """
    G = nx.DiGraph()
    for node in graph.get_all_nodes():
        G.add_node(node)
        for successor, weight in graph.edges_leaving(node):
            G.add_edge(node, successor, weight=float(weight))
    return G


def draw_graph(
    graph: Graph,
    path: Optional[Sequence[Hashable]] = None,
    ax: Optional[plt.Axes] = None,
) -> plt.Axes:
    """
    Draws the graph with a circular layout, labelling edges with their
    weights. Edges along path are highlighted.

    Args:
        graph: The graph to draw.
        path: Optional node sequence, e.g. from shortest_path_data.
        ax: Axes to draw on. A new figure is created if omitted.

    Returns:
        The axes the graph was drawn on.
    """
    if ax is None:
        _, ax = plt.subplots(figsize=(6, 6))

    G = to_networkx(graph)
    pos = nx.circular_layout(G)
    path_edges = set(zip(path, path[1:])) if path else set()
    edge_colors = ["red" if edge in path_edges else "gray" for edge in G.edges()]

    nx.draw_networkx(
        G,
        pos,
        ax=ax,
        with_labels=True,
        node_color="lightblue",
        edge_color=edge_colors,
        node_size=800,
        font_size=10,
        font_weight="bold",
        arrows=True,
    )
    nx.draw_networkx_edge_labels(
        G, pos, ax=ax, edge_labels=nx.get_edge_attributes(G, "weight")
    )
    ax.set_title("Graph Visualization (networkx)")
    ax.set_axis_off()
    return ax
