"""
Submission store.

Keeps, per form id, a bounded history of accepted submissions and a
snapshot of the most recent one for prefilling the form:

    "{form_id}-submissions"  JSON list of records, oldest first
    "{form_id}-current"      JSON object of the last submitted values

Missing or corrupt data reads as empty.
"""

import json
import logging
from datetime import datetime, timezone
from typing import Any, Callable, Dict, List, Optional

from pydantic import ValidationError

from formcheck.config.constants import DEFAULT_FORM_ID
from formcheck.config.settings import HISTORY_LIMIT
from formcheck.db.storage import StoragePort
from formcheck.models import Submission

logger = logging.getLogger(__name__)


def utc_timestamp() -> str:
    """Current UTC time as 2024-01-31T12:00:00.000Z."""
    now = datetime.now(timezone.utc)
    return now.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def history_key(form_id: str) -> str:
    return f"{form_id or DEFAULT_FORM_ID}-submissions"


def current_key(form_id: str) -> str:
    return f"{form_id or DEFAULT_FORM_ID}-current"


class SubmissionStore:
    """Manages submission history and the current snapshot."""

    def __init__(
        self,
        storage: StoragePort,
        history_limit: int = HISTORY_LIMIT,
        clock: Optional[Callable[[], str]] = None,
    ):
        self.storage = storage
        self.history_limit = history_limit
        self.clock = clock or utc_timestamp

    def save(self, form_id: str, data: Dict[str, str]) -> Submission:
        """Append a submission, trim the history and replace the snapshot."""
        submission = Submission(values=dict(data), timestamp=self.clock())

        records = self._load_records(form_id)
        records.append(submission.to_record())
        records = records[-self.history_limit:]

        self.storage.set(history_key(form_id), json.dumps(records))
        self.storage.set(current_key(form_id), json.dumps(submission.values))

        logger.info(
            f"STORE | Saved submission for '{form_id or DEFAULT_FORM_ID}' "
            f"({len(records)}/{self.history_limit} in history)"
        )
        return submission

    def load(self, form_id: str) -> Optional[Dict[str, Any]]:
        """Get the last submitted values, or None."""
        raw = self.storage.get(current_key(form_id))
        if raw is None:
            return None
        try:
            data = json.loads(raw)
        except json.JSONDecodeError as e:
            logger.warning(f"STORE | Corrupt snapshot for '{form_id}': {e}")
            return None
        if not isinstance(data, dict):
            logger.warning(f"STORE | Snapshot for '{form_id}' is not an object, ignoring")
            return None
        return data

    def history(self, form_id: str) -> List[Submission]:
        """Get the persisted submissions, oldest first."""
        submissions = []
        for record in self._load_records(form_id):
            try:
                submissions.append(Submission.from_record(record))
            except (KeyError, TypeError, ValidationError) as e:
                logger.warning(f"STORE | Skipping malformed record for '{form_id}': {e}")
        return submissions

    def clear_history(self, form_id: str):
        """Erase the submission history (the snapshot is kept)."""
        self.storage.remove(history_key(form_id))

    def _load_records(self, form_id: str) -> List[Dict[str, Any]]:
        raw = self.storage.get(history_key(form_id))
        if raw is None:
            return []
        try:
            records = json.loads(raw)
        except json.JSONDecodeError as e:
            logger.warning(f"STORE | Corrupt history for '{form_id}', starting empty: {e}")
            return []
        if not isinstance(records, list):
            logger.warning(f"STORE | History for '{form_id}' is not a list, starting empty")
            return []
        return [r for r in records if isinstance(r, dict)]
