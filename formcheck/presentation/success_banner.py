"""
Success Banner

Shows the success notice after an accepted submission and removes it
once, after the notice's display duration. The removal is not
cancellable.
"""

import logging
import threading
from typing import Callable, Optional

from formcheck.models import SuccessNotice

logger = logging.getLogger(__name__)

Scheduler = Callable[[float, Callable[[], None]], None]


def _timer_scheduler(delay: float, callback: Callable[[], None]):
    timer = threading.Timer(delay, callback)
    timer.daemon = True
    timer.start()


class SuccessBanner:
    """Holds the currently displayed notice, if any."""

    def __init__(self, scheduler: Optional[Scheduler] = None):
        self.scheduler = scheduler or _timer_scheduler
        self.notice: Optional[SuccessNotice] = None

    @property
    def visible(self) -> bool:
        return self.notice is not None

    def show(self, notice: SuccessNotice):
        self.notice = notice
        logger.info(f"BANNER | {notice.message}")
        self.scheduler(notice.duration_seconds, lambda: self._hide_if(notice))

    def hide(self):
        self.notice = None

    def _hide_if(self, notice: SuccessNotice):
        # A later notice keeps its own full display time
        if self.notice is notice:
            self.hide()
