from typing import Any, List, Optional
from urllib.parse import quote

import requests
from pydantic import ValidationError

from models import Widget

API_PATH = "/api/widgets"


class TransportError(Exception):
    """A widget API call that did not succeed (network failure, HTTP error or bad payload)."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


class WidgetsApi:
    """
    Blocking HTTP calls against the widget API.
    `session` is anything with requests' get/post/delete signature (requests.Session by default).
    """

    def __init__(self, base_url: str, session: Any = None, timeout: Optional[float] = None):
        self.base_url = (base_url or "").rstrip("/")
        self.session = session if session is not None else requests.Session()
        self.timeout = timeout

    @property
    def widgets_url(self) -> str:
        return f"{self.base_url}{API_PATH}"

    def _request(self, method: str, url: str, **kwargs) -> Any:
        try:
            response = getattr(self.session, method)(url, timeout=self.timeout, **kwargs)
        except requests.RequestException as e:
            raise TransportError(f"{method.upper()} {url} failed: {e}") from e

        if response.status_code >= 400:
            raise TransportError(
                f"{method.upper()} {url} returned HTTP {response.status_code}",
                status_code=response.status_code,
            )
        return response

    def get_widgets(self) -> List[Widget]:
        response = self._request("get", self.widgets_url)
        try:
            data = response.json()
            if not isinstance(data, list):
                raise TypeError(f"expected a list, got {type(data).__name__}")
            return [Widget.model_validate(item) for item in data]
        except (ValueError, TypeError, ValidationError) as e:
            raise TransportError(f"GET {self.widgets_url} returned an unusable body: {e}") from e

    def save_widget(self, widget: Widget) -> None:
        self._request("post", self.widgets_url, json=widget.model_dump())

    def delete_widget(self, widget_id: str) -> None:
        self._request("delete", f"{self.widgets_url}/{quote(widget_id, safe='')}")
