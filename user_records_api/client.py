"""User Records API client.

A thin wrapper around the service's REST endpoints, for scripts and
frontends written in Python.  It uses the ``requests`` library.

Every public method returns a tuple ``(data, error)``.  On success
``error`` is ``None``; on failure ``data`` is ``None`` and ``error`` is
a dict with ``status_code`` (``None`` for transport failures) and
``message`` (the ``error`` field of the response body when present).
Example::

    api = UserRecordsAPI(base_url="http://localhost:3000")
    user, error = api.create_user("Ada", "ada@example.com")
    if error is None:
        api.update_user(user["id"], "Ada Lovelace", user["email"])
"""

from __future__ import annotations

import logging
import os
from typing import Any, Dict, List, Optional, Tuple

import requests

DEFAULT_BASE_URL = os.getenv("API_URL", "http://localhost:3000")

logger = logging.getLogger(__name__)

Result = Tuple[Optional[Any], Optional[Dict[str, Any]]]


class UserRecordsAPI:
    """Client for the ``/users`` resource."""

    def __init__(
        self,
        *,
        base_url: Optional[str] = None,
        session: Optional[requests.Session] = None,
        timeout: float = 15,
    ) -> None:
        """Initialise the client.

        Args:
            base_url: Base URL of the service.  Defaults to the
                ``API_URL`` environment variable.
            session: Optional requests session.  If not supplied a
                session will be created automatically.
            timeout: Per-request timeout in seconds.
        """
        self.base_url = (base_url or DEFAULT_BASE_URL).rstrip("/")
        self.session = session or requests.Session()
        self.timeout = timeout

    # ------------------------------------------------------------------
    # Low level HTTP helper
    # ------------------------------------------------------------------
    def _request(self, method: str, path: str, *, json_body: Any | None = None) -> Result:
        url = f"{self.base_url}{path}"
        try:
            logger.debug("Sending %s request to %s", method, url)
            response = self.session.request(
                method=method,
                url=url,
                json=json_body,
                timeout=self.timeout,
            )
            response.raise_for_status()
            if response.content:
                return response.json(), None
            return None, None
        except requests.HTTPError as exc:
            status = exc.response.status_code if exc.response is not None else None
            message = ""
            if exc.response is not None:
                try:
                    body = exc.response.json()
                    message = body.get("error") or body.get("detail") or str(body)
                except ValueError:
                    message = exc.response.text
            if not message:
                message = str(exc)
            logger.error("API request failed (%s): %s", status, message)
            return None, {"status_code": status, "message": message}
        except requests.RequestException as exc:
            logger.error("API request failed: %s", exc)
            return None, {"status_code": None, "message": str(exc)}

    # ------------------------------------------------------------------
    # User operations
    # ------------------------------------------------------------------
    def list_users(self) -> Tuple[List[Dict[str, Any]], Optional[Dict[str, Any]]]:
        """Retrieve all users.  On error the list is empty."""
        data, error = self._request("GET", "/users")
        return (data or []), error

    def get_user(self, user_id: str) -> Result:
        return self._request("GET", f"/users/{user_id}")

    def create_user(self, name: str, email: str) -> Result:
        """Create a user; the returned record carries the new ``id``."""
        return self._request("POST", "/users", json_body={"name": name, "email": email})

    def update_user(self, user_id: str, name: str, email: str) -> Result:
        return self._request("PUT", f"/users/{user_id}", json_body={"name": name, "email": email})

    def delete_user(self, user_id: str) -> Result:
        return self._request("DELETE", f"/users/{user_id}")
