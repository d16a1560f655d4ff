"""
Verification Client — Twilio Verify
Issues one-time codes to a user and checks codes they send back.
"""

import logging
from enum import Enum

import requests

from review_service.errors import UpstreamError

logger = logging.getLogger(__name__)

TWILIO_VERIFY_URL = "https://verify.twilio.com/v2"

# Twilio error codes we answer locally instead of failing the request
INVALID_PARAMETER = 60200
MAX_CHECK_ATTEMPTS = 60202
MAX_SEND_ATTEMPTS = 60203
TOO_MANY_REQUESTS = 20429
NOT_FOUND = 20404


class SendCodeResult(Enum):
    SUCCESS = "success"
    INVALID_IDENTIFIER = "invalid_identifier"
    RATE_LIMITED = "rate_limited"


class VerificationClient:
    def __init__(self, app=None):
        self.account_sid = ""
        self.auth_token = ""
        self.service_sid = ""
        self.channel = "email"
        self.recipient_format = "{username}"
        self.timeout = 10.0
        if app is not None:
            self.init_app(app)

    def init_app(self, app):
        self.account_sid = app.config["TWILIO_ACCOUNT_SID"]
        self.auth_token = app.config["TWILIO_AUTH_TOKEN"]
        self.service_sid = app.config["TWILIO_VERIFY_SERVICE_SID"]
        self.channel = app.config["VERIFICATION_CHANNEL"]
        self.recipient_format = app.config["VERIFICATION_RECIPIENT_FORMAT"]
        self.timeout = app.config["HTTP_TIMEOUT"]

    def recipient(self, username):
        return self.recipient_format.format(username=username)

    def _post(self, resource, data):
        url = f"{TWILIO_VERIFY_URL}/Services/{self.service_sid}/{resource}"
        try:
            return requests.post(
                url,
                data=data,
                auth=(self.account_sid, self.auth_token),
                timeout=self.timeout,
            )
        except requests.RequestException as e:
            raise UpstreamError(f"Twilio Verify unreachable: {e}") from e

    @staticmethod
    def _error_code(response):
        try:
            return response.json().get("code")
        except ValueError:
            return None

    def send_code(self, username):
        """Ask Twilio to deliver a fresh code to ``username``."""
        response = self._post("Verifications", {
            "To": self.recipient(username),
            "Channel": self.channel,
        })

        if response.ok:
            logger.info("Verification code sent to %s", username)
            return SendCodeResult.SUCCESS

        error_code = self._error_code(response)
        if error_code == INVALID_PARAMETER:
            return SendCodeResult.INVALID_IDENTIFIER
        if error_code in (MAX_SEND_ATTEMPTS, TOO_MANY_REQUESTS):
            return SendCodeResult.RATE_LIMITED

        raise UpstreamError(
            f"Twilio Verify returned {response.status_code}: {response.text}"
        )

    def does_code_match(self, username, code):
        """
        True only when Twilio approves ``code`` for ``username``.
        An expired, unknown or exhausted verification is a mismatch.
        """
        response = self._post("VerificationCheck", {
            "To": self.recipient(username),
            "Code": code,
        })

        if response.ok:
            return response.json().get("status") == "approved"

        if response.status_code == 404 or self._error_code(response) in (NOT_FOUND, MAX_CHECK_ATTEMPTS):
            return False

        raise UpstreamError(
            f"Twilio Verify returned {response.status_code}: {response.text}"
        )
