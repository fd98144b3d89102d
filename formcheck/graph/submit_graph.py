"""
Submit Graph Builder

Constructs the LangGraph workflow run when a form is submitted.

Graph Structure:
    form_validation -> [route_after_form_validation]
        invalid -> END
        valid   -> persistence -> success_notice -> reset_form -> END
"""

import logging
from typing import TYPE_CHECKING

from langgraph.graph import StateGraph, END

from formcheck.state.form_state import FormState
from formcheck.nodes.form_validation import form_validation_node
from formcheck.nodes.persistence import persistence_node
from formcheck.nodes.completion import success_notice_node, reset_form_node
from formcheck.routing.conditional_edges import route_after_form_validation

if TYPE_CHECKING:
    from formcheck.controller import FormController

logger = logging.getLogger(__name__)


def create_submit_graph(controller: "FormController", verbose: bool = False):
    """
    Creates the submit workflow for one form controller.

    Args:
        controller: FormController whose form, store and banner the nodes use
        verbose: Enable verbose logging

    Returns:
        Compiled LangGraph workflow
    """
    workflow = StateGraph(FormState)

    # =========================================================================
    # Add all nodes
    # =========================================================================

    workflow.add_node(
        "form_validation",
        lambda s: form_validation_node(s, controller, verbose),
    )
    workflow.add_node(
        "persistence",
        lambda s: persistence_node(s, controller.store, verbose),
    )
    workflow.add_node(
        "success_notice",
        lambda s: success_notice_node(s, controller.banner, controller.banner_seconds, verbose),
    )
    workflow.add_node(
        "reset_form",
        lambda s: reset_form_node(s, controller, verbose),
    )

    # =========================================================================
    # Edges
    # =========================================================================

    workflow.set_entry_point("form_validation")

    workflow.add_conditional_edges(
        "form_validation",
        route_after_form_validation,
        {
            "persistence": "persistence",
            "END": END,
        },
    )

    workflow.add_edge("persistence", "success_notice")
    workflow.add_edge("success_notice", "reset_form")
    workflow.add_edge("reset_form", END)

    compiled = workflow.compile()
    logger.info(f"Submit graph created for form '{controller.form.form_id}': {len(workflow.nodes)} nodes")

    return compiled
