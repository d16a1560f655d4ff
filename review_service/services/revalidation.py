"""
Asks the front end to regenerate a cached page on its next request.
"""

import logging

import requests

from review_service.errors import UpstreamError

logger = logging.getLogger(__name__)


class Revalidator:
    def __init__(self, app=None):
        self.url = ""
        self.token = ""
        self.timeout = 10.0
        if app is not None:
            self.init_app(app)

    def init_app(self, app):
        self.url = app.config["REVALIDATE_URL"]
        self.token = app.config["REVALIDATE_TOKEN"]
        self.timeout = app.config["HTTP_TIMEOUT"]

    def revalidate(self, path):
        if not self.url:
            raise UpstreamError("REVALIDATE_URL is not configured")

        headers = {"Authorization": f"Bearer {self.token}"} if self.token else {}
        try:
            response = requests.post(
                self.url,
                json={"path": path},
                headers=headers,
                timeout=self.timeout,
            )
            response.raise_for_status()
        except requests.RequestException as e:
            raise UpstreamError(f"Revalidating {path} failed: {e}") from e

        logger.info("Revalidated %s", path)
