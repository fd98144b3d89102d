"""Processing nodes for the submit graph."""

from formcheck.nodes.form_validation import form_validation_node
from formcheck.nodes.persistence import persistence_node
from formcheck.nodes.completion import success_notice_node, reset_form_node

__all__ = [
    "form_validation_node",
    "persistence_node",
    "success_notice_node",
    "reset_form_node",
]
