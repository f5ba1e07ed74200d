"""
Uniform response envelope returned by every gateway endpoint.
"""

from typing import Any, Dict, Optional

from pydantic import BaseModel


class Envelope(BaseModel):
    """Standard response format: ``{success, message, data?, error?}``."""

    success: bool
    message: str
    data: Optional[Any] = None
    error: Optional[str] = None

    def to_content(self) -> Dict[str, Any]:
        """Serialize the envelope, omitting empty ``data`` and ``error``."""
        content: Dict[str, Any] = {"success": self.success, "message": self.message}
        if self.data is not None:
            content["data"] = self.data
        if self.error:
            content["error"] = self.error
        return content


def success_response(message: str, data: Optional[Any] = None) -> Envelope:
    """Build a successful envelope."""
    return Envelope(success=True, message=message, data=data)


def error_response(message: str, error: Optional[Any] = None) -> Envelope:
    """Build a failed envelope; ``error`` is stringified when present."""
    return Envelope(
        success=False,
        message=message,
        error=str(error) if error is not None else None,
    )
