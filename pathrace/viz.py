"""
Plotly figure builders for traversal snapshots and race summaries.
"""

from __future__ import annotations

import plotly.graph_objects as go

from pathrace.config import (
    COLOR_CURRENT,
    COLOR_END,
    COLOR_PATH,
    COLOR_START,
    COLOR_UNVISITED,
    COLOR_VISITED,
    EDGE_LINE_WIDTH,
    NODE_MARKER_SIZE,
    PATH_LINE_WIDTH,
)
from pathrace.graph.model import Graph
from pathrace.search.state import PathStep


def _node_color(node_id: str, step: PathStep | None, start: str, end: str) -> str:
    if node_id == start:
        return COLOR_START
    if node_id == end:
        return COLOR_END
    if step is not None and node_id == step.current_node and not step.is_complete:
        return COLOR_CURRENT
    if step is not None and node_id in step.visited:
        return COLOR_VISITED
    return COLOR_UNVISITED


def create_snapshot_figure(
    graph: Graph,
    step: PathStep | None,
    start: str,
    end: str,
    title: str = "",
) -> go.Figure:
    """
    Draw the graph as it looks at one step.

    Traces, in order: background edges, current path, nodes.
    """
    edge_x: list[float | None] = []
    edge_y: list[float | None] = []
    for edge in graph.edges:
        a, b = graph.node(edge.source), graph.node(edge.target)
        if a is None or b is None:
            continue
        edge_x += [a.x, b.x, None]
        edge_y += [a.y, b.y, None]

    path = step.path if step is not None else ()
    path_nodes = [graph.node(node_id) for node_id in path]
    path_nodes = [node for node in path_nodes if node is not None]

    fig = go.Figure()
    fig.add_trace(go.Scatter(
        x=edge_x, y=edge_y,
        mode="lines",
        line=dict(color=COLOR_UNVISITED, width=EDGE_LINE_WIDTH),
        hoverinfo="skip",
        name="edges",
    ))
    fig.add_trace(go.Scatter(
        x=[node.x for node in path_nodes],
        y=[node.y for node in path_nodes],
        mode="lines",
        line=dict(color=COLOR_PATH, width=PATH_LINE_WIDTH),
        hoverinfo="skip",
        name="path",
    ))
    fig.add_trace(go.Scatter(
        x=[node.x for node in graph.nodes],
        y=[node.y for node in graph.nodes],
        mode="markers+text",
        text=[node.display_label for node in graph.nodes],
        textposition="middle center",
        marker=dict(
            size=NODE_MARKER_SIZE,
            color=[_node_color(node.id, step, start, end) for node in graph.nodes],
            line=dict(color="#333", width=1),
        ),
        hovertext=[node.id for node in graph.nodes],
        name="nodes",
    ))

    visited = len(step.visited) if step is not None else 0
    if title:
        fig.update_layout(title=f"{title} | Visited: {visited} | Path length: {len(path)}")
    fig.update_layout(
        showlegend=False,
        height=450,
        margin=dict(t=40, b=10, l=10, r=10),
    )
    # Screen coordinates grow downwards
    fig.update_yaxes(autorange="reversed", visible=False)
    fig.update_xaxes(visible=False)
    return fig


def create_win_count_chart(wins: dict[str, int]) -> go.Figure:
    """Bar chart of race wins per strategy."""
    ranked = sorted(wins.items(), key=lambda item: item[1], reverse=True)

    fig = go.Figure(data=[
        go.Bar(
            x=[name for name, _ in ranked],
            y=[count for _, count in ranked],
            marker_color=COLOR_VISITED,
        )
    ])
    fig.update_layout(
        title="Race Wins",
        yaxis_title="Wins",
        showlegend=False,
        height=280,
        margin=dict(t=35, b=40, l=45, r=15),
    )
    return fig
