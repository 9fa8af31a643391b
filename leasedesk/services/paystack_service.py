"""Thin client for the Paystack transactions API and webhook signatures."""

import hashlib
import hmac
import logging
from typing import Optional

import requests

from leasedesk.config import PAYSTACK_SECRET_KEY, PAYSTACK_BASE_URL, PAYSTACK_TIMEOUT

logger = logging.getLogger(__name__)


class PaystackError(Exception):
    pass


class PaystackService:
    def __init__(
        self,
        secret_key: str = PAYSTACK_SECRET_KEY,
        base_url: str = PAYSTACK_BASE_URL,
        timeout: float = PAYSTACK_TIMEOUT,
    ):
        self.secret_key = secret_key
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout

    @property
    def enabled(self) -> bool:
        return bool(self.secret_key)

    def initialize_transaction(
        self,
        email: str,
        amount: int,
        reference: str,
        currency: str,
        metadata: Optional[dict] = None,
    ) -> dict:
        """
        Start a hosted checkout for ``amount`` kobo.

        Returns:
            dict with authorization_url, access_code and reference
        """
        try:
            response = requests.post(
                f"{self.base_url}/transaction/initialize",
                json={
                    "email": email,
                    "amount": amount,
                    "reference": reference,
                    "currency": currency,
                    "metadata": metadata or {},
                },
                headers={"Authorization": f"Bearer {self.secret_key}"},
                timeout=self.timeout,
            )
            body = response.json()
        except (requests.RequestException, ValueError) as e:
            raise PaystackError(f"Paystack request failed: {e}") from e

        if response.status_code >= 400 or not body.get("status"):
            raise PaystackError(body.get("message") or f"Paystack returned {response.status_code}")

        return body["data"]

    def verify_signature(self, raw_body: bytes, signature: Optional[str]) -> bool:
        if not self.secret_key or not signature:
            return False
        expected = hmac.new(self.secret_key.encode(), raw_body, hashlib.sha512).hexdigest()
        return hmac.compare_digest(expected, signature)
