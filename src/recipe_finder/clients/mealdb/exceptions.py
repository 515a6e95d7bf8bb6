"""Recipe gateway client exceptions.

A single failed gateway call is recoverable: the search pipeline turns it
into an empty contribution. Only the details and random-recipe operations
surface these to the HTTP layer.
"""

from __future__ import annotations


class GatewayError(Exception):
    """Base exception for recipe gateway client errors."""


class GatewayCallFailedError(GatewayError):
    """Raised when one gateway request fails.

    Covers transport errors and timeouts, non-2xx statuses, and bodies
    that are not a decodable meals envelope.
    """

    def __init__(
        self,
        endpoint: str,
        value: str | None,
        reason: str,
        status_code: int | None = None,
    ) -> None:
        self.endpoint = endpoint
        self.value = value
        self.reason = reason
        self.status_code = status_code
        target = f"{endpoint}({value!r})" if value is not None else endpoint
        super().__init__(f"Gateway call {target} failed: {reason}")
