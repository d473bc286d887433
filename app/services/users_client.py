# app/services/users_client.py
from typing import Any, Dict
from urllib.parse import quote

import requests

from app.domain.errors import UpstreamError
from app.utils.retry import http_retry
from app.utils.settings import USERS_API_RETRIES, USERS_API_TIMEOUT, USERS_API_URL
from app.utils.logging import get_logger

logger = get_logger(__name__)


class UsersClient:
    """Klient users-service: GET /users/{id}, 200 = istnieje, 404 = brak.

    Kazdy inny status albo blad transportu to UpstreamError. Brak cache.
    """

    def __init__(
        self,
        base_url: str | None = None,
        timeout: float | None = None,
        attempts: int | None = None,
    ):
        self.base_url = (base_url or USERS_API_URL).rstrip("/")
        timeout = USERS_API_TIMEOUT if timeout is None else timeout
        # 0 -> bez timeoutu
        self.timeout = timeout or None
        self.attempts = attempts or USERS_API_RETRIES

    def _get(self, url: str) -> requests.Response:
        @http_retry(self.attempts)
        def send() -> requests.Response:
            return requests.get(url, timeout=self.timeout)

        return send()

    def fetch_user(self, user_id: str) -> Dict[str, Any] | None:
        url = f"{self.base_url}/users/{quote(str(user_id), safe='')}"
        logger.info(f"UsersClient GET {url}")

        try:
            resp = self._get(url)
        except requests.RequestException as e:
            logger.error(f"users-api unreachable: {e}")
            raise UpstreamError("users-api error", detail=str(e)) from e

        if resp.status_code == 404:
            return None

        if not 200 <= resp.status_code < 300:
            logger.error(f"users-api answered {resp.status_code} for user {user_id}")
            raise UpstreamError("users-api error", detail=f"status {resp.status_code}")

        try:
            return resp.json()
        except ValueError as e:
            raise UpstreamError("users-api error", detail="invalid JSON body") from e

    def user_exists(self, user_id: str) -> bool:
        return self.fetch_user(user_id) is not None
