"""
Helpers shared by the route handlers.
"""

from typing import Any, Awaitable, Dict, Optional, TypeVar

from shared.errors import UpstreamError
from shared.responses import success_response

T = TypeVar("T")


async def forward(call: Awaitable[T], failure_message: str) -> T:
    """Await a backend call, relabelling failures with an operation message."""
    try:
        return await call
    except UpstreamError as e:
        raise e.reword(failure_message)


def respond(message: str, data: Optional[Any] = None) -> Dict[str, Any]:
    """Successful envelope content."""
    return success_response(message, data).to_content()
