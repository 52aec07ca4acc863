"""Cinema API client.

A thin wrapper around the Cinema REST API built on ``requests``.  Every
method returns a ``(result, error)`` tuple instead of raising: on
success ``error`` is ``None``; on failure ``result`` is empty and
``error`` is a dictionary with ``status_code`` and ``message`` keys.

Resources are addressed by the names used in the URL:

* ``books``, ``movies`` – full CRUD at ``/<resource>`` and
  ``/<resource>/{id}``.
* ``users`` – list at ``/users``, detail at ``/users/detail?id=``,
  creation at ``/users/sign-up``.
* ``system-theater`` and ``group-theater`` – list and create.

The client supports an optional bearer token which is sent in the
``Authorization`` header.  The API does not check it today.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Tuple
from urllib.parse import quote

import requests


logger = logging.getLogger(__name__)

Error = Dict[str, Any]


@dataclass
class ResourcePaths:
    """URL layout of one resource.

    Attributes:
        collection: Path listing the resource, e.g. ``/books``.
        create: Path accepting ``POST`` for new records.
        item: Template for a single record, containing ``{id}``.
        detail: Template used for reads when it differs from ``item``.
    """

    collection: str
    create: str
    item: Optional[str] = None
    detail: Optional[str] = None


class CinemaAPI:
    """Client for interacting with the Cinema API."""

    RESOURCES: Dict[str, ResourcePaths] = {
        "books": ResourcePaths("/books", "/books", "/books/{id}"),
        "movies": ResourcePaths("/movies", "/movies", "/movies/{id}"),
        "users": ResourcePaths("/users", "/users/sign-up", "/users/{id}", "/users/detail?id={id}"),
        "system-theater": ResourcePaths("/system-theater", "/system-theater/create-system-theater"),
        "group-theater": ResourcePaths("/group-theater", "/group-theater/create-group-theater"),
    }

    def __init__(
        self,
        *,
        base_url: str,
        api_key: Optional[str] = None,
        session: Optional[requests.Session] = None,
        timeout: float = 15,
    ) -> None:
        """Initialise the API client.

        Args:
            base_url: Base URL for the API, e.g. ``http://localhost:4000``.
            api_key: Optional token sent as ``Authorization: Bearer <api_key>``.
            session: Optional requests session.  If not supplied a
                session will be created automatically.
            timeout: Seconds to wait for each response.
        """
        self.base_url = base_url.rstrip("/")
        self.api_key = api_key
        self.session = session or requests.Session()
        self.timeout = timeout

    # ------------------------------------------------------------------
    # Low level HTTP helpers
    # ------------------------------------------------------------------
    def _request(
        self, method: str, path: str, *, json_body: Any | None = None
    ) -> Tuple[Optional[Any], Optional[Error]]:
        """Perform an HTTP request to the API.

        Args:
            method: HTTP method (``GET``, ``POST``, ``PUT``, ``DELETE``).
            path: Path relative to :attr:`base_url` (e.g. ``/books``).
            json_body: JSON body to send with the request.
        Returns:
            A tuple ``(data, error)``.  ``data`` is the parsed JSON body,
            or ``None`` when the response had no content.
        """
        url = f"{self.base_url}{path}"
        headers: Dict[str, str] = {}
        if self.api_key:
            headers["Authorization"] = f"Bearer {self.api_key}"
        try:
            logger.debug("Sending %s request to %s", method, url)
            response = self.session.request(
                method=method,
                url=url,
                json=json_body,
                headers=headers,
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
                    err_json = exc.response.json()
                    if isinstance(err_json, dict):
                        message = err_json.get("detail") or err_json.get("message") or str(err_json)
                    else:
                        message = str(err_json)
                except ValueError:
                    message = exc.response.text
            if not message:
                message = str(exc)
            logger.error("API request failed (%s): %s", status, message)
            return None, {"status_code": status, "message": message}
        except requests.RequestException as exc:
            logger.error("API request failed: %s", exc)
            return None, {"status_code": None, "message": str(exc)}

    def _paths(self, resource: str) -> ResourcePaths:
        try:
            return self.RESOURCES[resource]
        except KeyError:
            raise ValueError(f"Unknown resource: {resource}") from None

    def _item_path(self, resource: str, record_id: str, *, read: bool = False) -> Optional[str]:
        paths = self._paths(resource)
        template = (paths.detail or paths.item) if read else paths.item
        if template is None:
            return None
        return template.replace("{id}", quote(str(record_id), safe=""))

    @staticmethod
    def _unsupported(resource: str, action: str) -> Error:
        logger.warning("No endpoint to %s %s", action, resource)
        return {"status_code": None, "message": f"{resource} does not support {action}"}

    # ------------------------------------------------------------------
    # Generic record operations
    # ------------------------------------------------------------------
    def list_records(self, resource: str) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        """Retrieve every record of ``resource``."""
        data, error = self._request("GET", self._paths(resource).collection)
        if error:
            return [], error
        return (data if isinstance(data, list) else []), None

    def get_record(self, resource: str, record_id: str) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Retrieve one record; a missing record yields a 404 error."""
        path = self._item_path(resource, record_id, read=True)
        if path is None:
            return None, self._unsupported(resource, "read")
        return self._request("GET", path)

    def create_record(self, resource: str, fields: Dict[str, Any]) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Create a record and return it with its assigned id."""
        return self._request("POST", self._paths(resource).create, json_body=fields)

    def update_record(
        self, resource: str, record_id: str, fields: Dict[str, Any]
    ) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Merge ``fields`` into a record.

        The server answers an unknown id with an empty body, so the
        result is ``(None, None)`` in that case.
        """
        path = self._item_path(resource, record_id)
        if path is None:
            return None, self._unsupported(resource, "update")
        return self._request("PUT", path, json_body=fields)

    def delete_record(self, resource: str, record_id: str) -> Tuple[bool, Optional[Error]]:
        """Delete a record.  Succeeds for unknown ids as well."""
        path = self._item_path(resource, record_id)
        if path is None:
            return False, self._unsupported(resource, "delete")
        _, error = self._request("DELETE", path)
        return error is None, error

    # ------------------------------------------------------------------
    # Convenience wrappers
    # ------------------------------------------------------------------
    def list_books(self) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        return self.list_records("books")

    def get_book(self, book_id: str) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self.get_record("books", book_id)

    def create_book(self, title: str, author: str, **extra: Any) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self.create_record("books", {"title": title, "author": author, **extra})

    def update_book(self, book_id: str, **fields: Any) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self.update_record("books", book_id, fields)

    def delete_book(self, book_id: str) -> Tuple[bool, Optional[Error]]:
        return self.delete_record("books", book_id)

    def list_movies(self) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        return self.list_records("movies")

    def list_groups_by_system(self, system_code: Any) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        """Retrieve the theater groups of one theater system."""
        code = quote(str(system_code), safe="")
        data, error = self._request("GET", f"/group-theater/{code}")
        if error:
            return [], error
        return (data if isinstance(data, list) else []), None
