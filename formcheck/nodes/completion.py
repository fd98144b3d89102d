"""
Completion Nodes

Final steps of an accepted submission: show the success notice, then
clear the form.
"""

import logging
from typing import TYPE_CHECKING, Optional

from formcheck.models import SuccessNotice
from formcheck.presentation.success_banner import SuccessBanner
from formcheck.state.form_state import FormState

if TYPE_CHECKING:
    from formcheck.controller import FormController

logger = logging.getLogger(__name__)


def success_notice_node(
    state: FormState,
    banner: Optional[SuccessBanner],
    duration_seconds: float,
    verbose: bool = False,
) -> FormState:
    """Emit the success notice (to the banner, when one is attached)."""
    notice = SuccessNotice(duration_seconds=duration_seconds)

    if banner is not None:
        banner.show(notice)
    elif verbose:
        logger.info("SUBMIT | No banner attached, notice not displayed")

    return {
        **state,
        "notification": notice.model_dump(),
    }


def reset_form_node(
    state: FormState,
    controller: "FormController",
    verbose: bool = False,
) -> FormState:
    """Empty every field and forget all recorded errors."""
    controller.reset()

    if verbose:
        logger.info(f"SUBMIT | Form '{state['form_id']}' reset")

    return {
        **state,
        "validation_errors": {},
        "is_reset": True,
    }
