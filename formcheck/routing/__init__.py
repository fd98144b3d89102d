"""Conditional routing functions for the submit graph."""

from formcheck.routing.conditional_edges import route_after_form_validation

__all__ = ["route_after_form_validation"]
