"""
PayPal Orders v2 adapter.

Tokens come from the OAuth2 client-credentials grant and are fetched per call;
nothing is cached or retried. Errors surface as PaymentProviderError carrying
PayPal's own message where one is returned.
"""
import logging

import requests
from flask import current_app

from carbooking.exceptions import PaymentProviderError
from carbooking.utils.constants import DEFAULT_CURRENCY

logger = logging.getLogger(__name__)

LIVE_API = "https://api-m.paypal.com"
SANDBOX_API = "https://api-m.sandbox.paypal.com"


class PayPalClient:
    def __init__(self, client_id, client_secret, mode="sandbox", timeout=10.0):
        self.client_id = client_id
        self.client_secret = client_secret
        self.mode = mode or "sandbox"
        self.timeout = timeout

    @classmethod
    def from_config(cls, config) -> "PayPalClient":
        client = cls(
            config.get("PAYPAL_CLIENT_ID"),
            config.get("PAYPAL_CLIENT_SECRET"),
            config.get("PAYPAL_MODE"),
            config.get("HTTP_TIMEOUT", 10.0),
        )
        logger.info("PayPal client in %s mode", client.mode)
        return client

    @property
    def base_url(self) -> str:
        return LIVE_API if self.mode == "live" else SANDBOX_API

    def _post(self, path, what, **kwargs) -> dict:
        try:
            resp = requests.post(f"{self.base_url}{path}", timeout=self.timeout, **kwargs)
        except requests.RequestException as e:
            logger.error("PayPal %s request failed: %s", what, e)
            raise PaymentProviderError(f"PayPal {what} failed: {e}")

        try:
            data = resp.json()
        except ValueError:
            data = {}
        if not resp.ok:
            logger.error("PayPal %s error (%s): %s", what, resp.status_code, data)
            raise PaymentProviderError(data.get("message") or data.get("error_description") or None)
        return data

    def generate_access_token(self) -> str:
        if not self.client_id or not self.client_secret:
            raise PaymentProviderError("Missing PayPal credentials")
        data = self._post(
            "/v1/oauth2/token",
            "token",
            data={"grant_type": "client_credentials"},
            auth=(self.client_id, self.client_secret),
        )
        return data.get("access_token")

    def _auth_headers(self) -> dict:
        return {
            "Content-Type": "application/json",
            "Authorization": f"Bearer {self.generate_access_token()}",
        }

    def create_order(self, amount, currency: str = DEFAULT_CURRENCY) -> dict:
        body = {
            "intent": "CAPTURE",
            "purchase_units": [
                {"amount": {"currency_code": currency, "value": str(amount)}},
            ],
        }
        return self._post("/v2/checkout/orders", "create order", json=body, headers=self._auth_headers())

    def capture_order(self, order_id: str) -> dict:
        return self._post(
            f"/v2/checkout/orders/{order_id}/capture", "capture", headers=self._auth_headers()
        )


def create_order(amount, currency: str = DEFAULT_CURRENCY) -> dict:
    return PayPalClient.from_config(current_app.config).create_order(amount, currency)


def capture_order(order_id: str) -> dict:
    return PayPalClient.from_config(current_app.config).capture_order(order_id)


def capture_id_from(capture: dict) -> str:
    """purchase_units[0].payments.captures[0].id of a capture response."""
    try:
        return capture["purchase_units"][0]["payments"]["captures"][0]["id"]
    except (KeyError, IndexError, TypeError):
        raise PaymentProviderError("PayPal capture response has no capture id")
