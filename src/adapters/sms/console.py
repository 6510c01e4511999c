"""
Console SMS sender adapter - Implements SmsSender protocol.

This module provides a console-based implementation of the domain's
SMS sender port, logging verification codes to stdout for development.
"""

import logging

logger = logging.getLogger(__name__)


class ConsoleSmsSender:
    """
    Implements SmsSender protocol via console logging.

    Uses structural subtyping - no explicit inheritance from Protocol.
    For demo/development purposes - prints verification codes to stdout.
    """

    def send_verification_code(self, phone_number: str, code: str) -> None:
        """
        Log verification code to console (simulates SMS delivery).

        In production, this would be replaced with an SMS gateway adapter.
        The code is logged at INFO level so it shows up in the service logs.

        Args:
            phone_number: Recipient phone number
            code: Numeric verification code
        """
        logger.info("[VERIFICATION] Phone: %s Code: %s", phone_number, code)
