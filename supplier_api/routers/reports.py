"""Report router — streams the generated PDF back as an attachment."""


from fastapi import APIRouter, Depends
from fastapi.responses import StreamingResponse
from sqlalchemy.ext.asyncio import AsyncSession

from supplier_api.db.base import get_db
from supplier_api.schemas.common import ErrorResponse
from supplier_api.schemas.report import ReportRequest
from supplier_api.services.report import (
    REPORT_FILE_NAME,
    REPORT_MEDIA_TYPE,
    ReportService,
    iter_chunks,
)

router = APIRouter(tags=["Reports"])


@router.post(
    "/generateReport",
    response_class=StreamingResponse,
    responses={
        200: {"content": {REPORT_MEDIA_TYPE: {}}, "description": "PDF file download"},
        400: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
    },
)
async def generate_report(
    body: ReportRequest | None = None,
    session: AsyncSession = Depends(get_db),
):
    pdf = await ReportService(session).generate(body.user_ids if body else None)
    headers = {"Content-Disposition": f"attachment; filename={REPORT_FILE_NAME}"}
    return StreamingResponse(iter_chunks(pdf), media_type=REPORT_MEDIA_TYPE, headers=headers)
