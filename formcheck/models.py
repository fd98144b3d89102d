"""
Pydantic Models

Records produced by the submission flow.
"""

from typing import Any, Dict

from pydantic import BaseModel, ConfigDict, Field

from formcheck.config.settings import SUCCESS_BANNER_SECONDS
from formcheck.config.constants import SUCCESS_MESSAGE


class Submission(BaseModel):
    """One accepted, fully valid set of field values."""
    model_config = ConfigDict(frozen=True)

    values: Dict[str, str] = Field(default_factory=dict)
    timestamp: str = Field(..., description="ISO-8601 UTC creation time")

    def to_record(self) -> Dict[str, Any]:
        """Flat storage shape: the field values plus a timestamp key."""
        return {**self.values, "timestamp": self.timestamp}

    @classmethod
    def from_record(cls, record: Dict[str, Any]) -> "Submission":
        values = {k: v for k, v in record.items() if k != "timestamp"}
        return cls(values=values, timestamp=record["timestamp"])


class SuccessNotice(BaseModel):
    """Payload for the success banner."""
    message: str = SUCCESS_MESSAGE
    duration_seconds: float = Field(SUCCESS_BANNER_SECONDS, ge=0)
