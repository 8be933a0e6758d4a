from __future__ import annotations

import logging
from typing import Any, Literal

from postgrest.exceptions import APIError

from jobgoblin.core.errors import UpstreamError
from jobgoblin.integrations.supabase_client import admin_client

logger = logging.getLogger(__name__)

Table = Literal["users", "applications", "resumes"]

# Postgres error raised when an id cannot be cast to the column type.
INVALID_TEXT_REPRESENTATION = "22P02"

OWNER_COLUMN: dict[str, str] = {
    "users": "id",
    "applications": "user_id",
    "resumes": "user_id",
}


def _owner_column(table: Table) -> str:
    return OWNER_COLUMN[table]


def list_by_owner(table: Table, owner_id: str) -> list[dict[str, Any]]:
    try:
        response = admin_client().table(table).select("*").eq(_owner_column(table), owner_id).execute()
    except Exception as exc:  # noqa: BLE001
        logger.error("records_list_failed table=%s: %s", table, exc)
        raise UpstreamError(f"Failed to load {table}.", code="store_list_failed") from exc
    return list(response.data or [])


def insert(table: Table, row: dict[str, Any]) -> dict[str, Any]:
    try:
        response = admin_client().table(table).insert(row).execute()
    except Exception as exc:  # noqa: BLE001
        logger.error("records_insert_failed table=%s: %s", table, exc)
        raise UpstreamError(f"Failed to save {table}.", code="store_insert_failed") from exc
    data = list(response.data or [])
    return data[0] if data else dict(row)


def get_owned(table: Table, row_id: str, owner_id: str) -> dict[str, Any] | None:
    try:
        response = (
            admin_client()
            .table(table)
            .select("*")
            .eq("id", row_id)
            .eq(_owner_column(table), owner_id)
            .limit(1)
            .execute()
        )
    except APIError as exc:
        if exc.code == INVALID_TEXT_REPRESENTATION:
            logger.info("records_get_malformed_id table=%s id=%s", table, row_id)
            return None
        logger.error("records_get_failed table=%s: %s", table, exc)
        raise UpstreamError(f"Failed to load {table}.", code="store_get_failed") from exc
    except Exception as exc:  # noqa: BLE001
        logger.error("records_get_failed table=%s: %s", table, exc)
        raise UpstreamError(f"Failed to load {table}.", code="store_get_failed") from exc
    data = list(response.data or [])
    return data[0] if data else None


def delete_owned(table: Table, row_id: str, owner_id: str) -> None:
    try:
        admin_client().table(table).delete().eq("id", row_id).eq(_owner_column(table), owner_id).execute()
    except Exception as exc:  # noqa: BLE001
        logger.error("records_delete_failed table=%s: %s", table, exc)
        raise UpstreamError(f"Failed to delete from {table}.", code="store_delete_failed") from exc
