"""
reCAPTCHA adapter - verifies captcha tokens posted with registrations.

The verification endpoint receives the server secret and the client token
as form fields and answers ``{"success": true|false, ...}``.

Failure Policy:
===============
Verification fails closed. A missing token, a network error, a non-2xx
answer, a body that is not JSON, or ``success`` other than ``true`` all
count as "not verified".
"""

from typing import Optional

import httpx

from zelene.config.settings import settings
from zelene.shared.core.logging import get_logger


logger = get_logger("captcha")


class RecaptchaAdapter:
    """Adapter for the reCAPTCHA siteverify API."""

    def __init__(
        self,
        secret_key: Optional[str] = None,
        verify_url: Optional[str] = None,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """
        Initialize reCAPTCHA adapter.

        Args:
            secret_key: Server-side secret
            verify_url: Verification endpoint
            timeout: Request timeout in seconds
            transport: Optional httpx transport (tests use httpx.MockTransport)
        """
        self.secret_key = secret_key or settings.RECAPTCHA_SECRET_KEY
        self.verify_url = verify_url or settings.RECAPTCHA_VERIFY_URL
        self.timeout = timeout or settings.RECAPTCHA_TIMEOUT_SECONDS
        self.transport = transport

    async def verify(self, token: Optional[str]) -> bool:
        """
        Verify a captcha token.

        Args:
            token: Token produced by the client widget

        Returns:
            True only when the endpoint confirms the token
        """
        if not token:
            return False

        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self.transport) as client:
                resp = await client.post(
                    self.verify_url,
                    data={"secret": self.secret_key, "response": token},
                )
            resp.raise_for_status()
            payload = resp.json()
        except (httpx.HTTPError, ValueError) as e:
            logger.warning("Captcha verification failed", error=str(e))
            return False

        if not isinstance(payload, dict):
            logger.warning("Captcha verification returned unexpected body")
            return False

        verified = payload.get("success") is True
        if not verified:
            logger.info("Captcha rejected", error_codes=payload.get("error-codes"))
        return verified
