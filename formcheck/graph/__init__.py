"""Submit workflow graph."""

from formcheck.graph.submit_graph import create_submit_graph

__all__ = ["create_submit_graph"]
