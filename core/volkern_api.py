from __future__ import annotations
import json
import logging
from typing import Any, Optional

import requests

from core.config import Settings
from core.request_spec import RequestSpec

logger = logging.getLogger(__name__)


class VolkernAPIError(RuntimeError):
    def __init__(self, status: int, details: Any) -> None:
        self.status = status
        self.details = details
        super().__init__(
            f"Volkern API Error ({status}): {json.dumps(details, separators=(',', ':'), ensure_ascii=False)}"
        )


def safe_json(resp: requests.Response) -> Any:
    try:
        return resp.json()
    except ValueError:
        return {}


class VolkernAPI:
    def __init__(self, settings: Settings, session: Optional[requests.Session] = None) -> None:
        if not settings.api_key or settings.api_key.strip() == "":
            raise RuntimeError("VOLKERN_API_KEY is empty.")
        self.base = settings.api_url.rstrip("/")
        self.timeout = settings.timeout
        self.session = session or requests.Session()
        self.headers = {
            "Authorization": f"Bearer {settings.api_key.strip()}",
            "Content-Type": "application/json",
            "Accept": "application/json",
            "User-Agent": f"{settings.service_name}/{settings.version}",
        }

    def perform(self, spec: RequestSpec) -> Any:
        url = f"{self.base}{spec.path}"
        r = self.session.request(
            spec.method,
            url,
            headers=self.headers,
            params=dict(spec.query) if spec.query else None,
            json=spec.json_body(),
            timeout=self.timeout,
        )
        logger.debug("%s %s -> %s", spec.method, spec.path, r.status_code)
        if not 200 <= r.status_code < 300:
            raise VolkernAPIError(r.status_code, safe_json(r))
        if not r.content:
            return None
        return r.json()

    def close(self) -> None:
        self.session.close()
