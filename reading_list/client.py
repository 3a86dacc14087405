"""
HTTP client for the reading list API.

Mirrors the four article operations and keeps a local copy of the article
list. Every acknowledged mutation invalidates that copy so the next
``get_all()`` re-fetches from the server.
"""
from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Any, List, Optional

import requests

from reading_list.db.schemas import Article, HealthStatus
from reading_list.utils.urls import strip_trailing_slash

logger = logging.getLogger(__name__)


def _env_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return float(raw)
    except ValueError:
        logger.warning("Invalid float for %s=%r; using %s", name, raw, default)
        return default


@dataclass(frozen=True)
class ClientConfig:
    base_url: str = "http://localhost:8000"
    timeout_seconds: float = 5.0

    @classmethod
    def from_environment(cls) -> "ClientConfig":
        return cls(
            base_url=os.getenv("READING_LIST_API_URL", "http://localhost:8000"),
            timeout_seconds=_env_float("READING_LIST_API_TIMEOUT_SECONDS", 5.0),
        )


class ArticleClientError(Exception):
    """Raised when a call fails in transport or is rejected by the server."""

    def __init__(self, message: str, status_code: Optional[int] = None, detail: Any = None):
        super().__init__(message)
        self.status_code = status_code
        self.detail = detail


class ArticleValidationError(ArticleClientError):
    """The server rejected the input (HTTP 422)."""


class ArticleClient:
    def __init__(
        self,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        session: Optional[requests.Session] = None,
        config: Optional[ClientConfig] = None,
    ):
        self.config = config or ClientConfig.from_environment()
        self.base_url = strip_trailing_slash(base_url or self.config.base_url)
        self.timeout = timeout if timeout is not None else self.config.timeout_seconds
        self.session = session or requests.Session()
        self._articles: Optional[List[Article]] = None

    # -- cache -----------------------------------------------------------
    @property
    def is_cached(self) -> bool:
        return self._articles is not None

    def invalidate(self) -> None:
        self._articles = None

    # -- transport -------------------------------------------------------
    def _request(self, method: str, path: str, **kwargs) -> requests.Response:
        url = f"{self.base_url}{path}"
        try:
            response = self.session.request(method, url, timeout=self.timeout, **kwargs)
        except requests.RequestException as exc:
            raise ArticleClientError(f"{method} {path} failed: {exc}") from exc

        if response.status_code >= 400:
            try:
                data = response.json()
                detail = data.get("detail") if isinstance(data, dict) else data
            except ValueError:
                detail = response.text
            error_cls = ArticleValidationError if response.status_code == 422 else ArticleClientError
            raise error_cls(
                f"{method} {path} returned {response.status_code}",
                status_code=response.status_code,
                detail=detail,
            )
        return response

    # -- operations ------------------------------------------------------
    def create(self, title: str, url: str) -> Article:
        response = self._request("POST", "/articles/", json={"title": title, "url": url})
        self.invalidate()
        return Article.model_validate(response.json())

    def get_all(self, refresh: bool = False) -> List[Article]:
        if self._articles is None or refresh:
            response = self._request("GET", "/articles/")
            self._articles = [Article.model_validate(item) for item in response.json()]
            logger.debug("article list fetched: %d items", len(self._articles))
        return list(self._articles)

    def toggle_read(self, article_id: int, current_state: Optional[bool] = None) -> int:
        body = {} if current_state is None else {"currentState": current_state}
        response = self._request("POST", f"/articles/{article_id}/toggle-read", json=body)
        self.invalidate()
        return int(response.json().get("affected", 0))

    def delete(self, article_id: int) -> int:
        response = self._request("DELETE", f"/articles/{article_id}")
        self.invalidate()
        return int(response.json().get("affected", 0))

    def health(self) -> HealthStatus:
        try:
            response = self.session.get(f"{self.base_url}/health", timeout=self.timeout)
        except requests.RequestException as exc:
            raise ArticleClientError(f"GET /health failed: {exc}") from exc
        try:
            return HealthStatus.model_validate(response.json())
        except ValueError as exc:
            raise ArticleClientError(
                f"GET /health returned {response.status_code}",
                status_code=response.status_code,
                detail=response.text,
            ) from exc
