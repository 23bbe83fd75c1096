"""JSON-backed repositories for fund price documents."""
from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

import requests

from fund_dashboard.domain.repositories import RawFundDataSource

logger = logging.getLogger(__name__)


class RemoteJsonFundRepository(RawFundDataSource):
    def __init__(self, url: str, timeout: float = 15.0, session: requests.Session | None = None) -> None:
        self._url = url
        self._timeout = timeout
        self._session = session or requests.Session()

    def fetch_document(self) -> Any:
        logger.info("Fetching fund data from %s", self._url)
        response = self._session.get(self._url, timeout=self._timeout)
        response.raise_for_status()
        return response.json()


class JsonFileFundRepository(RawFundDataSource):
    def __init__(self, path: Path | str) -> None:
        self._path = Path(path)

    def fetch_document(self) -> Any:
        logger.info("Reading fund data from %s", self._path)
        return json.loads(self._path.read_text(encoding="utf-8"))
