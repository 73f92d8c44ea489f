from __future__ import annotations

import json
import threading
from dataclasses import dataclass
from typing import Any, Callable, Optional, Sequence

from google.auth.exceptions import GoogleAuthError
from google.oauth2 import service_account
from googleapiclient.discovery import build
from googleapiclient.errors import HttpError

from ..common.logging_setup import get_logger
from ..core.exceptions import ExternalStoreError, UnavailableError

logger = get_logger("sheets")

SCOPES = ["https://www.googleapis.com/auth/spreadsheets"]


@dataclass
class SheetsConfig:
    spreadsheet_id: str
    service_account_json: str = ""


def parse_service_account(raw: str) -> Optional[dict]:
    """Service-account credentials arrive as one JSON string in the environment."""
    if not raw or not raw.strip():
        return None
    try:
        info = json.loads(raw)
    except json.JSONDecodeError as e:
        logger.error("GOOGLE_SERVICE_ACCOUNT is not valid JSON: %s", e)
        return None
    return info if isinstance(info, dict) else None


class SheetsClient:
    """Thin wrapper over the Sheets v4 ``values`` API.

    Note: A client whose authorization failed stays in place but reports
    itself unavailable; every call then raises ``UnavailableError``.

    The discovery service sits on an ``httplib2.Http`` transport that must not
    be shared between threads, so each thread builds its own service from
    ``service_factory`` on first use. A ``service`` passed in directly is
    used as is by every thread.
    """

    def __init__(
        self,
        config: SheetsConfig,
        *,
        service: Any = None,
        service_factory: Optional[Callable[[], Any]] = None,
    ):
        self._config = config
        if service_factory is None and service is not None:

            def service_factory():
                return service

        self._service_factory = service_factory
        self._local = threading.local()

    @classmethod
    def connect(cls, config: SheetsConfig) -> "SheetsClient":
        client = cls(config)
        client.authorize()
        return client

    def authorize(self) -> None:
        info = parse_service_account(self._config.service_account_json)
        if not info or not self._config.spreadsheet_id:
            logger.warning("Google Sheets not configured (missing credentials or spreadsheet id)")
            return
        try:
            credentials = service_account.Credentials.from_service_account_info(info, scopes=SCOPES)

            def factory():
                return build("sheets", "v4", credentials=credentials, cache_discovery=False)

            # Bad credentials fail here rather than on the first request.
            self._local.service = factory()
        except (GoogleAuthError, ValueError, KeyError) as e:
            logger.error("Failed to init Sheets client: %s", e)
            return
        self._service_factory = factory
        logger.info("Google Sheets client ready")

    @property
    def available(self) -> bool:
        return self._service_factory is not None

    def _thread_service(self):
        service = getattr(self._local, "service", None)
        if service is None:
            service = self._service_factory()
            self._local.service = service
        return service

    def _values(self):
        if self._service_factory is None:
            raise UnavailableError("Google Sheets not configured")
        return self._thread_service().spreadsheets().values()

    def read_range(self, range_name: str) -> list[list[str]]:
        values = self._values()
        try:
            res = values.get(spreadsheetId=self._config.spreadsheet_id, range=range_name).execute()
        except (HttpError, GoogleAuthError, OSError) as e:
            raise ExternalStoreError(f"Reading {range_name} failed") from e
        return list(res.get("values") or [])

    def append_row(self, range_name: str, row: Sequence[Any]) -> None:
        values = self._values()
        try:
            values.append(
                spreadsheetId=self._config.spreadsheet_id,
                range=range_name,
                valueInputOption="USER_ENTERED",
                body={"values": [list(row)]},
            ).execute()
        except (HttpError, GoogleAuthError, OSError) as e:
            raise ExternalStoreError(f"Appending to {range_name} failed") from e


def cell(row: Sequence[Any], index: int) -> str:
    """Sheets drops trailing empty cells, so short rows are normal."""
    if index < len(row) and row[index] is not None:
        return str(row[index]).strip()
    return ""
