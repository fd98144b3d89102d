"""User feedback: inline field errors and the success banner."""

from formcheck.presentation.error_presenter import ErrorPresenter
from formcheck.presentation.success_banner import SuccessBanner

__all__ = ["ErrorPresenter", "SuccessBanner"]
