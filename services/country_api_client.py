"""HTTP client for the Country REST API.

Every endpoint answers with a JSON response envelope, including failures,
so the HTTP status code of the reply is not inspected: a 400 carrying
``{"ifSuccess": false, ...}`` is a normal, renderable answer. Only replies
that never arrive or cannot be read as an envelope raise ``TransportError``.
"""

from __future__ import annotations

from typing import Any, Mapping, Optional
from urllib.parse import quote

import requests
from pydantic import ValidationError as PydanticValidationError

from domain.models.country import Country
from domain.models.response_envelope import ResponseEnvelope
from middleware.errors import MalformedEnvelopeError, TransportError

COUNTRY_PATH = "/country"
COUNTRIES_LIST_PATH = "/country/CountriesList"
ALLOWED_METHODS = {"GET", "POST", "PUT", "DELETE"}


class CountryApiClient:
    """Thin wrapper around a ``requests.Session`` bound to one API base URL."""

    def __init__(
        self,
        base_url: str,
        session: Optional[requests.Session] = None,
        timeout: Optional[float] = 10.0,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.session = session or requests.Session()
        self.timeout = timeout

    def url_for(self, path: str) -> str:
        return f"{self.base_url}/{path.lstrip('/')}"

    def dispatch(
        self,
        path: str,
        method: str = "GET",
        body: Optional[Mapping[str, Any]] = None,
    ) -> ResponseEnvelope:
        """Send one request and parse the reply as a response envelope."""
        method = method.upper()
        if method not in ALLOWED_METHODS:
            raise ValueError(f"Unsupported HTTP method: {method}")

        kwargs: dict[str, Any] = {"timeout": self.timeout}
        if body is not None:
            # ``json=`` serializes the body and sets Content-Type: application/json
            kwargs["json"] = dict(body)

        url = self.url_for(path)
        try:
            resp = self.session.request(method, url, **kwargs)
        except requests.RequestException as exc:
            raise TransportError(
                f"{method} {url} failed: {exc}",
                details={"method": method, "url": url},
            ) from exc

        try:
            payload = resp.json()
        except ValueError as exc:
            raise MalformedEnvelopeError(
                f"{method} {url} returned a non-JSON body",
                details={"method": method, "url": url, "http_status": resp.status_code},
            ) from exc

        try:
            return ResponseEnvelope.model_validate(payload)
        except PydanticValidationError as exc:
            raise MalformedEnvelopeError(
                f"{method} {url} returned JSON that is not a response envelope",
                details={"method": method, "url": url, "http_status": resp.status_code},
            ) from exc

    def get_country(self, code: str) -> ResponseEnvelope:
        return self.dispatch(f"{COUNTRY_PATH}/{quote(code, safe='')}")

    def add_country(self, country: Country) -> ResponseEnvelope:
        return self.dispatch(COUNTRY_PATH, method="POST", body=country.to_api())

    def update_country(self, country: Country) -> ResponseEnvelope:
        return self.dispatch(COUNTRY_PATH, method="PUT", body=country.to_api())

    def delete_country(self, code: str) -> ResponseEnvelope:
        return self.dispatch(f"{COUNTRY_PATH}/{quote(code, safe='')}", method="DELETE")

    def countries_list_url(self) -> str:
        """Page the browser navigates to for the full list; not fetched here."""
        return self.url_for(COUNTRIES_LIST_PATH)
