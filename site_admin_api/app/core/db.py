"""
Hosted data store integration.

Records live in a Supabase (PostgREST) database; this module provides
the small query builder the service layer uses to reach it.  A query
is assembled fluently and sent with ``execute``::

    rows = await store.table("services").select().order("created_at").execute()
    row = await store.table("services").select().eq("id", service_id).single().execute()

``DataStore.execute`` is the only method that performs network I/O.
It receives a fully described :class:`Query` and returns the raw list
of rows, which keeps fakes for tests down to one method.  Shaping the
rows (``single``/``maybe_single``) happens in :meth:`Query.execute`.

Nothing is cached: every call is a fresh request.
"""

import logging
from typing import Any, Dict, List, Optional, Tuple

import httpx

from .exceptions import DataStoreError, NoRowsError

logger = logging.getLogger(__name__)


class Query:
    """A single select/insert/update/delete against one table."""

    def __init__(self, store: "DataStore", table: str) -> None:
        self._store = store
        self.table = table
        self.method = "GET"
        self.columns = "*"
        self.payload: Optional[Any] = None
        self.filters: List[Tuple[str, Any]] = []
        self.order_by: Optional[Tuple[str, bool]] = None
        self.mode = "many"

    # ------------------------------------------------------------------
    # Builders
    # ------------------------------------------------------------------
    def select(self, columns: str = "*") -> "Query":
        self.columns = columns
        return self

    def insert(self, row: Dict[str, Any]) -> "Query":
        self.method = "POST"
        self.payload = [row]
        return self

    def update(self, values: Dict[str, Any]) -> "Query":
        self.method = "PATCH"
        self.payload = values
        return self

    def delete(self) -> "Query":
        self.method = "DELETE"
        return self

    def eq(self, column: str, value: Any) -> "Query":
        self.filters.append((column, value))
        return self

    def order(self, column: str, desc: bool = True) -> "Query":
        self.order_by = (column, desc)
        return self

    def single(self) -> "Query":
        """Expect exactly one row; anything else raises ``NoRowsError``."""
        self.mode = "single"
        return self

    def maybe_single(self) -> "Query":
        """Expect at most one row; zero rows yields ``None``."""
        self.mode = "maybe_single"
        return self

    # ------------------------------------------------------------------
    # Execution
    # ------------------------------------------------------------------
    async def execute(self) -> Any:
        rows = await self._store.execute(self)
        return self._shape(rows)

    def _shape(self, rows: List[Dict[str, Any]]) -> Any:
        if self.mode == "many":
            return rows
        if len(rows) == 1:
            return rows[0]
        if self.mode == "maybe_single" and not rows:
            return None
        raise NoRowsError()


class DataStore:
    """Async PostgREST client authenticated with the service role key."""

    def __init__(
        self,
        url: str,
        key: str,
        *,
        timeout: float = 15,
        client: Optional[httpx.AsyncClient] = None,
    ) -> None:
        self.base_url = url.rstrip("/")
        self.key = key
        self._client = client or httpx.AsyncClient(timeout=timeout)
        self._owns_client = client is None

    def table(self, name: str) -> Query:
        return Query(self, name)

    async def execute(self, query: Query) -> List[Dict[str, Any]]:
        """Send ``query`` and return the rows the store answered with.

        Raises
        ------
        DataStoreError
            On transport failures, on any non-2xx response and on a
            body that is not JSON rows.
        """
        url = f"{self.base_url}/rest/v1/{query.table}"
        params = self._build_params(query)
        headers = {
            "apikey": self.key,
            "Authorization": f"Bearer {self.key}",
        }
        if query.method in {"POST", "PATCH"}:
            headers["Prefer"] = "return=representation"
        try:
            logger.debug("%s %s %s", query.method, url, params)
            response = await self._client.request(
                query.method,
                url,
                params=params,
                json=query.payload,
                headers=headers,
            )
        except httpx.HTTPError as exc:
            raise DataStoreError(f"Data store request failed: {exc}") from exc

        if response.is_error:
            message, code = _error_details(response)
            raise DataStoreError(message, status_code=response.status_code, code=code)
        if not response.content:
            return []
        try:
            data = response.json()
        except ValueError as exc:
            raise DataStoreError(
                f"Data store returned a non-JSON body: {response.text[:200]}",
                status_code=response.status_code,
            ) from exc
        if isinstance(data, dict):
            data = [data]
        if not isinstance(data, list) or not all(isinstance(row, dict) for row in data):
            raise DataStoreError("Data store returned an unexpected payload", status_code=response.status_code)
        return data

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()

    @staticmethod
    def _build_params(query: Query) -> Dict[str, str]:
        params: Dict[str, str] = {}
        if query.method != "DELETE":
            params["select"] = query.columns
        for column, value in query.filters:
            params[column] = f"eq.{_format_value(value)}"
        if query.order_by:
            column, desc = query.order_by
            params["order"] = f"{column}.{'desc' if desc else 'asc'}"
        return params


def _format_value(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def _error_details(response: httpx.Response) -> Tuple[str, Optional[str]]:
    """Extract PostgREST's ``message``/``code`` from an error response."""
    try:
        body = response.json()
    except ValueError:
        return response.text or f"HTTP {response.status_code}", None
    if isinstance(body, dict):
        return str(body.get("message") or body), body.get("code")
    return str(body), None
