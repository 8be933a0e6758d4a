from __future__ import annotations

from jobgoblin.integrations import records
from jobgoblin.schemas.applications import ApplicationCreate, ApplicationRecord


def list_applications(owner_id: str) -> list[ApplicationRecord]:
    return [ApplicationRecord.model_validate(row) for row in records.list_by_owner("applications", owner_id)]


def create_application(owner_id: str, payload: ApplicationCreate) -> ApplicationRecord:
    row = payload.model_dump()
    row["user_id"] = owner_id
    return ApplicationRecord.model_validate(records.insert("applications", row))
