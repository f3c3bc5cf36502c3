"""PDF report for a selection of supplier records.

Layout: a centered title, the local date and time of generation, then five
lines per supplier separated by a blank paragraph. reportlab's platypus
flows the story onto as many A4 pages as it needs.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Iterable, Iterator
from datetime import datetime
from io import BytesIO
from xml.sax.saxutils import escape

from reportlab.lib.enums import TA_CENTER
from reportlab.lib.pagesizes import A4
from reportlab.lib.styles import ParagraphStyle, getSampleStyleSheet
from reportlab.platypus import Paragraph, SimpleDocTemplate, Spacer
from sqlalchemy.ext.asyncio import AsyncSession

from supplier_api.core.exceptions import InputError, ReportGenerationError
from supplier_api.domain.supplier import Supplier
from supplier_api.repositories.supplier import SupplierRepository

logger = logging.getLogger(__name__)

REPORT_TITLE = "Supplier Management Report"
REPORT_FILE_NAME = "Supplier_report.pdf"
REPORT_MEDIA_TYPE = "application/pdf"

CHUNK_SIZE = 64 * 1024

_RECORD_LINES = (
    ("Name", "name"),
    ("Company", "company_name"),
    ("Product", "product_name"),
    ("Contact", "contact_number"),
    ("Email", "email"),
)


def _styles() -> tuple[ParagraphStyle, ParagraphStyle]:
    sheet = getSampleStyleSheet()
    title = ParagraphStyle(
        "ReportTitle", parent=sheet["Title"], fontSize=16, leading=20, alignment=TA_CENTER
    )
    body = ParagraphStyle("ReportBody", parent=sheet["Normal"], fontSize=12, leading=15)
    return title, body


def _local_date(moment: datetime) -> str:
    return f"{moment.month}/{moment.day}/{moment.year}"


def _local_time(moment: datetime) -> str:
    return f"{moment.hour % 12 or 12}:{moment:%M:%S %p}"


def build_story(suppliers: Iterable[Supplier], generated_at: datetime) -> list:
    title_style, body_style = _styles()
    story: list = [
        Paragraph(REPORT_TITLE, title_style),
        Spacer(1, 12),
        Paragraph(f"Date: {_local_date(generated_at)}", body_style),
        Paragraph(f"Time: {_local_time(generated_at)}", body_style),
        Spacer(1, 12),
    ]

    for supplier in suppliers:
        for label, field in _RECORD_LINES:
            value = escape(str(getattr(supplier, field) or ""))
            story.append(Paragraph(f"{label}: {value}", body_style))
        story.append(Spacer(1, 12))

    return story


def render_report(suppliers: Iterable[Supplier], generated_at: datetime | None = None) -> bytes:
    """Render the report and return the PDF bytes.

    *generated_at* defaults to the current server-local time.
    """
    if generated_at is None:
        generated_at = datetime.now()

    buffer = BytesIO()
    doc = SimpleDocTemplate(
        buffer,
        pagesize=A4,
        title=REPORT_TITLE,
        author="Supplier Management",
    )
    doc.build(build_story(suppliers, generated_at))
    return buffer.getvalue()


def iter_chunks(payload: bytes, chunk_size: int = CHUNK_SIZE) -> Iterator[bytes]:
    for start in range(0, len(payload), chunk_size):
        yield payload[start:start + chunk_size]


class ReportService:
    """Fetches the selected suppliers and renders them into a PDF."""

    def __init__(self, session: AsyncSession):
        self._repo = SupplierRepository(session)

    async def generate(self, supplier_ids: list[str | int] | None) -> bytes:
        if not supplier_ids:
            raise InputError("No users selected")

        try:
            suppliers = await self._repo.get_many([str(i) for i in supplier_ids])
            # CPU-bound; render off the event loop
            pdf = await asyncio.to_thread(render_report, suppliers)
        except Exception as exc:
            logger.exception("Report generation failed for %d ids", len(supplier_ids))
            raise ReportGenerationError() from exc

        logger.info("Generated report for %d of %d suppliers", len(suppliers), len(supplier_ids))
        return pdf
