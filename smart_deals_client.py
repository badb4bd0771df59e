"""Smart Deals API client.

This module defines a small client wrapper around the Smart Deals REST
API.  It uses the ``requests`` library and exposes one method per
route:

* :meth:`list_deals`, :meth:`list_my_products`, :meth:`list_latest_products`
* :meth:`get_deal`, :meth:`create_deal`, :meth:`update_deal`, :meth:`delete_deal`
* :meth:`list_bids`, :meth:`list_product_bids`, :meth:`create_bid`, :meth:`delete_bid`

Every method returns a tuple ``(data, error)``.  On success ``error``
is ``None``; on failure ``data`` is ``None`` (or an empty list for
listing methods) and ``error`` is a dictionary with the keys
``status_code`` and ``message``.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Tuple

import requests


logger = logging.getLogger(__name__)

Error = Dict[str, Any]


@dataclass(frozen=True)
class ApiEndpoint:
    """An API route.

    Attributes:
        path: The URI template, e.g. ``/deals`` or ``/deals/{id}``.
        method: The HTTP method in upper case.
    """

    path: str
    method: str

    def format(self, **params: Any) -> str:
        path = self.path
        for key, value in params.items():
            path = path.replace("{" + key + "}", str(value))
        return path


ENDPOINTS: Dict[str, ApiEndpoint] = {
    "list_deals": ApiEndpoint("/deals", "GET"),
    "list_my_products": ApiEndpoint("/myProduct", "GET"),
    "list_latest_products": ApiEndpoint("/latestProduct", "GET"),
    "get_deal": ApiEndpoint("/deals/{id}", "GET"),
    "create_deal": ApiEndpoint("/deals", "POST"),
    "update_deal": ApiEndpoint("/deals/{id}", "PUT"),
    "delete_deal": ApiEndpoint("/deals/{id}", "DELETE"),
    "list_bids": ApiEndpoint("/bids", "GET"),
    "list_product_bids": ApiEndpoint("/product/bids/{id}", "GET"),
    "create_bid": ApiEndpoint("/bids", "POST"),
    "delete_bid": ApiEndpoint("/bids/{id}", "DELETE"),
}


class SmartDealsAPI:
    """Client for interacting with the Smart Deals API."""

    def __init__(
        self,
        *,
        base_url: str,
        timeout: float = 15,
        session: Optional[requests.Session] = None,
    ) -> None:
        """Initialise the API client.

        Args:
            base_url: Base URL for the API, e.g. ``http://localhost:3000``.
            timeout: Seconds to wait for each request.
            session: Optional requests session.  If not supplied a
                session will be created automatically.
        """
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.session = session or requests.Session()

    # ------------------------------------------------------------------
    # Low level HTTP helpers
    # ------------------------------------------------------------------
    def _request(
        self, method: str, path: str, *, params: Dict[str, Any] | None = None,
        json_body: Any | None = None
    ) -> Tuple[Optional[Any], Optional[Error]]:
        """Perform an HTTP request to the API.

        Returns:
            A tuple ``(data, error)``.  ``data`` contains the parsed JSON
            response on success; ``error`` describes a failure.
        """
        url = f"{self.base_url}{path}"
        try:
            logger.debug("Sending %s request to %s", method, url)
            response = self.session.request(
                method=method,
                url=url,
                params=params,
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
                    err_json = exc.response.json()
                    message = err_json.get("message") or err_json.get("detail") or str(err_json)
                except ValueError:
                    message = exc.response.text
            if not message:
                message = str(exc)
            logger.error("API request failed (%s): %s", status, message)
            return None, {"status_code": status, "message": message}
        except requests.RequestException as exc:
            logger.error("API request failed: %s", exc)
            return None, {"status_code": None, "message": str(exc)}

    def _call(self, name: str, *, params: Dict[str, Any] | None = None,
              json_body: Any | None = None, **path_params: Any) -> Tuple[Optional[Any], Optional[Error]]:
        endpoint = ENDPOINTS[name]
        return self._request(
            endpoint.method, endpoint.format(**path_params), params=params, json_body=json_body
        )

    def _call_list(self, name: str, **kwargs: Any) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        data, error = self._call(name, **kwargs)
        if error:
            return [], error
        return data if isinstance(data, list) else [], None

    # ------------------------------------------------------------------
    # Deal operations
    # ------------------------------------------------------------------
    def list_deals(self) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        """Retrieve all deals."""
        return self._call_list("list_deals")

    def list_my_products(self, email: str) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        """Retrieve the deals listed by ``email``."""
        return self._call_list("list_my_products", params={"email": email})

    def list_latest_products(self) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        """Retrieve the most recent deals (at most six)."""
        return self._call_list("list_latest_products")

    def get_deal(self, deal_id: str) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Retrieve a single deal; ``data`` is ``None`` when it does not exist."""
        return self._call("get_deal", id=deal_id)

    def create_deal(self, deal: Dict[str, Any]) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Create a deal.  ``data`` holds the insert acknowledgement."""
        return self._call("create_deal", json_body=deal)

    def update_deal(self, deal_id: str, fields: Dict[str, Any]) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Overwrite ``fields`` on a deal.  ``data`` holds the update acknowledgement."""
        return self._call("update_deal", id=deal_id, json_body=fields)

    def delete_deal(self, deal_id: str) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self._call("delete_deal", id=deal_id)

    # ------------------------------------------------------------------
    # Bid operations
    # ------------------------------------------------------------------
    def list_bids(self, email: Optional[str] = None) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        """Retrieve the bids of one buyer, or every bid when ``email`` is omitted."""
        params = {"email": email} if email else None
        return self._call_list("list_bids", params=params)

    def list_product_bids(self, product_id: str) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        """Retrieve the bids on a product, highest price first."""
        return self._call_list("list_product_bids", id=product_id)

    def create_bid(self, bid: Dict[str, Any]) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self._call("create_bid", json_body=bid)

    def delete_bid(self, bid_id: str) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        return self._call("delete_bid", id=bid_id)
