from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional


@dataclass
class FormError(Exception):
    """Raise when a submitted form cannot be turned into typed values."""

    message: str
    field: Optional[str] = None
    status_code: int = 400

    def to_context(self, request_id: str | None = None) -> Dict[str, Any]:
        return {
            "page_title": "Bad Request",
            "message": self.message,
            "field": self.field,
            "request_id": request_id,
        }


def abort_form(message: str, field: Optional[str] = None) -> None:
    """Convenience wrapper."""
    raise FormError(message=message, field=field)
