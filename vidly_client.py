"""Vidly API client.

A thin wrapper around the Vidly REST API built on ``requests``.  It is
meant for anything that drives the rental desk programmatically, such
as kiosks or import jobs.

Every public method returns a tuple ``(data, error)``.  On success
``data`` holds the decoded JSON body and ``error`` is ``None``; on
failure ``data`` is ``None`` (or an empty list for listings) and
``error`` is a dictionary with ``status_code`` and ``message``.

Authentication uses the ``x-auth-token`` header.  Pass ``token=`` to
the constructor or call :meth:`VidlyClient.login` /
:meth:`VidlyClient.register_user`, which store the issued token on the
client.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Tuple

import requests


logger = logging.getLogger(__name__)

Error = Dict[str, Any]


class VidlyClient:
    """Client for the Vidly API."""

    def __init__(
        self,
        *,
        base_url: str,
        token: Optional[str] = None,
        session: Optional[requests.Session] = None,
        timeout: float = 15,
    ) -> None:
        """Initialise the API client.

        Args:
            base_url: Base URL of the server, e.g. ``http://localhost:3000``.
                The ``/api`` prefix is added by the client.
            token: Optional auth token sent as ``x-auth-token``.
            session: Optional requests session.  If not supplied a
                session will be created automatically.
            timeout: Per-request timeout in seconds.
        """
        self.base_url = base_url.rstrip("/")
        self.token = token
        self.session = session or requests.Session()
        self.timeout = timeout

    # ------------------------------------------------------------------
    # Low level HTTP helpers
    # ------------------------------------------------------------------
    def _request(
        self, method: str, path: str, *, json_body: Any | None = None
    ) -> Tuple[Optional[Any], Optional[Error], Optional[requests.Response]]:
        url = f"{self.base_url}/api{path}"
        headers: Dict[str, str] = {}
        if self.token:
            headers["x-auth-token"] = self.token
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
        except requests.HTTPError as exc:
            status = exc.response.status_code if exc.response is not None else None
            message = ""
            if exc.response is not None:
                try:
                    err_json = exc.response.json()
                    message = err_json.get("detail") or str(err_json)
                except ValueError:
                    message = exc.response.text
            if not message:
                message = str(exc)
            logger.error("API request failed (%s): %s", status, message)
            return None, {"status_code": status, "message": message}, exc.response
        except requests.RequestException as exc:
            logger.error("API request failed: %s", exc)
            return None, {"status_code": None, "message": str(exc)}, None
        if response.content:
            return response.json(), None, response
        return None, None, response

    def _call(self, method: str, path: str, json_body: Any | None = None) -> Tuple[Optional[Any], Optional[Error]]:
        data, error, _ = self._request(method, path, json_body=json_body)
        return data, error

    def _list(self, path: str) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        data, error = self._call("GET", path)
        if error:
            return [], error
        return (data if isinstance(data, list) else []), None

    # ------------------------------------------------------------------
    # Users and authentication
    # ------------------------------------------------------------------
    def register_user(self, name: str, email: str, password: str) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Register a user and keep the token returned by the server."""
        data, error, response = self._request(
            "POST", "/users/", json_body={"name": name, "email": email, "password": password}
        )
        if error:
            return None, error
        token = response.headers.get("x-auth-token") if response is not None else None
        if token:
            self.token = token
        return data, None

    def login(self, email: str, password: str) -> Tuple[Optional[str], Optional[Error]]:
        """Log in and store the token on the client."""
        data, error = self._call("POST", "/auth/", {"email": email, "password": password})
        if error:
            return None, error
        self.token = (data or {}).get("access_token")
        return self.token, None

    def me(self) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self._call("GET", "/users/me")

    # ------------------------------------------------------------------
    # Catalogue
    # ------------------------------------------------------------------
    def list_genres(self) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        return self._list("/genres/")

    def create_genre(self, name: str) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self._call("POST", "/genres/", {"name": name})

    def list_movies(self) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        return self._list("/movies/")

    def create_movie(
        self, title: str, genre_id: str, number_in_stock: int, daily_rental_rate: float
    ) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        payload = {
            "title": title,
            "genreId": genre_id,
            "numberInStock": number_in_stock,
            "dailyRentalRate": daily_rental_rate,
        }
        return self._call("POST", "/movies/", payload)

    def list_customers(self) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        return self._list("/customers/")

    def create_customer(self, name: str, phone: str, is_gold: bool = False) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self._call("POST", "/customers/", {"name": name, "phone": phone, "isGold": is_gold})

    # ------------------------------------------------------------------
    # Rentals
    # ------------------------------------------------------------------
    def list_rentals(self) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        return self._list("/rentals/")

    def rent_movie(self, customer_id: str, movie_id: str) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Check ``movie_id`` out to ``customer_id``."""
        return self._call("POST", "/rentals/", {"customerId": customer_id, "movieId": movie_id})

    def return_movie(self, customer_id: str, movie_id: str) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Settle the open rental and return it with its ``rentalFee``."""
        return self._call("POST", "/returns/", {"customerId": customer_id, "movieId": movie_id})
