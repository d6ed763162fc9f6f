"""Record router — generic CRUD routes for every registered collection.

For each slug in :data:`RECORD_KINDS` (mounted under ``/api``):
    /employees/{employee_id}/{slug}  — List, create
    /{slug}/{record_id}              — Get, patch, delete

Responses are never cached by the browser; the dashboard refetches after
every mutation instead.
"""

from fastapi import APIRouter, Body, Depends, Response
from sqlalchemy.ext.asyncio import AsyncSession

from peoplehub.database import get_db
from peoplehub.records.registry import RECORD_KINDS, RecordKind
from peoplehub.records.service import RecordService

NO_STORE = "no-store, no-cache, must-revalidate, private"

router = APIRouter(prefix="")


def _no_store(response: Response) -> None:
    response.headers["Cache-Control"] = NO_STORE


def _register(kind: RecordKind) -> None:
    """Attach the five routes for *kind* to :data:`router`."""
    Out = kind.out_schema
    tags = [kind.slug]

    async def list_records(
        employee_id: str,
        response: Response,
        db: AsyncSession = Depends(get_db),
    ):
        records = await RecordService.list_records(db, kind, employee_id)
        _no_store(response)
        return {"data": [Out.model_validate(r).model_dump(mode="json") for r in records]}

    async def create_record(
        employee_id: str,
        response: Response,
        body: kind.create_schema = Body(...),  # type: ignore[valid-type]
        db: AsyncSession = Depends(get_db),
    ):
        record = await RecordService.create_record(db, kind, employee_id, body)
        _no_store(response)
        return {
            "data": Out.model_validate(record).model_dump(mode="json"),
            "message": f"{kind.label} entry created.",
        }

    async def get_record(
        record_id: str,
        response: Response,
        db: AsyncSession = Depends(get_db),
    ):
        record = await RecordService.get_record(db, kind, record_id)
        _no_store(response)
        return {"data": Out.model_validate(record).model_dump(mode="json")}

    async def update_record(
        record_id: str,
        response: Response,
        body: kind.update_schema = Body(...),  # type: ignore[valid-type]
        db: AsyncSession = Depends(get_db),
    ):
        record = await RecordService.update_record(db, kind, record_id, body)
        _no_store(response)
        return {
            "data": Out.model_validate(record).model_dump(mode="json"),
            "message": f"{kind.label} entry updated.",
        }

    async def delete_record(
        record_id: str,
        db: AsyncSession = Depends(get_db),
    ):
        await RecordService.delete_record(db, kind, record_id)
        return Response(status_code=204, headers={"Cache-Control": NO_STORE})

    name = kind.slug.replace("-", "_")
    collection = f"/employees/{{employee_id}}/{kind.slug}"
    item = f"/{kind.slug}/{{record_id}}"

    router.add_api_route(collection, list_records, methods=["GET"], tags=tags,
                         name=f"list_{name}", summary=f"List {kind.label.lower()}")
    router.add_api_route(collection, create_record, methods=["POST"], tags=tags,
                         status_code=201, name=f"create_{name}",
                         summary=f"Create {kind.label.lower()} entry")
    router.add_api_route(item, get_record, methods=["GET"], tags=tags,
                         name=f"get_{name}", summary=f"Get {kind.label.lower()} entry")
    router.add_api_route(item, update_record, methods=["PATCH"], tags=tags,
                         name=f"update_{name}", summary=f"Update {kind.label.lower()} entry")
    router.add_api_route(item, delete_record, methods=["DELETE"], tags=tags,
                         status_code=204, name=f"delete_{name}",
                         summary=f"Delete {kind.label.lower()} entry")


for _kind in RECORD_KINDS.values():
    _register(_kind)
