"""
Email adapter - Outgoing mail.

Only password-reset mail exists today. Delivery is not wired to a
provider yet: LoggingEmailSender records what would have been sent, which
is also what tests assert against.
"""

import functools
from typing import Protocol

from ticketing_api.shared.core.logging import get_logger

logger = get_logger("ticketing.email")


class EmailSender(Protocol):
    """Anything that can deliver a password-reset email."""

    async def send_password_reset(self, email: str, token: str) -> None:
        ...


class LoggingEmailSender:
    """EmailSender that logs instead of delivering. Keeps the last messages for inspection."""

    def __init__(self) -> None:
        self.sent: list[tuple[str, str]] = []

    async def send_password_reset(self, email: str, token: str) -> None:
        self.sent.append((email, token))
        logger.info("Password reset email queued", email=email)


@functools.lru_cache(maxsize=1)
def get_email_sender() -> LoggingEmailSender:
    """Get or create the email sender singleton."""
    return LoggingEmailSender()
