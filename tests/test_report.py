import asyncio
from datetime import datetime
from types import SimpleNamespace

from reportlab.platypus import Paragraph

from supplier_api.services import report
from supplier_api.services.report import (
    REPORT_TITLE,
    build_story,
    iter_chunks,
    render_report,
)


def _supplier(**kwargs):
    defaults = {
        "name": "Jo",
        "company_name": "Co",
        "product_name": "Pen",
        "contact_number": "1234567890",
        "email": "a@b.com",
    }
    defaults.update(kwargs)
    return SimpleNamespace(**defaults)


def _page_count(pdf):
    return pdf.count(b"/Type /Page") - pdf.count(b"/Type /Pages")


def _lines(story):
    return [f.getPlainText() for f in story if isinstance(f, Paragraph)]


def test_story_layout():
    generated_at = datetime(2024, 3, 5, 14, 7, 9)
    lines = _lines(build_story([_supplier(), _supplier(name="Ann")], generated_at))
    assert lines[0] == REPORT_TITLE
    assert lines[1] == "Date: 3/5/2024"
    assert lines[2] == "Time: 2:07:09 PM"
    assert lines[3:8] == [
        "Name: Jo",
        "Company: Co",
        "Product: Pen",
        "Contact: 1234567890",
        "Email: a@b.com",
    ]
    assert lines[8] == "Name: Ann"
    assert len(lines) == 3 + 2 * 5


def test_story_escapes_markup_in_values():
    lines = _lines(build_story([_supplier(company_name="Smith & <Sons>")], datetime.now()))
    assert "Company: Smith & <Sons>" in lines


def test_render_report_is_a_pdf():
    pdf = render_report([_supplier()])
    assert pdf.startswith(b"%PDF")
    assert REPORT_TITLE.encode() in pdf


def test_render_report_spans_pages_for_many_suppliers():
    one = render_report([_supplier()])
    many = render_report([_supplier(name=f"S{i}") for i in range(60)])
    assert _page_count(many) > _page_count(one) == 1


def test_iter_chunks_reassembles():
    payload = bytes(range(256)) * 10
    chunks = list(iter_chunks(payload, chunk_size=1000))
    assert [len(c) for c in chunks] == [1000, 1000, 560]
    assert b"".join(chunks) == payload


def test_generate_report_with_no_ids_is_rejected(client):
    response = client.post("/generateReport", json={"userIds": []})
    assert response.status_code == 400
    assert response.json()["message"] == "No users selected"


def test_generate_report_without_ids_key_is_rejected(client):
    response = client.post("/generateReport", json={})
    assert response.status_code == 400
    assert response.json()["message"] == "No users selected"


def test_generate_report_streams_pdf_attachment(client, supplier_factory):
    ids = [supplier_factory(name="Ann")["id"], supplier_factory(name="Bob")["id"]]
    response = client.post("/generateReport", json={"userIds": ids + ["unknown-id"]})
    assert response.status_code == 200
    assert response.headers["content-type"] == "application/pdf"
    assert response.headers["content-disposition"] == "attachment; filename=Supplier_report.pdf"
    assert response.content.startswith(b"%PDF")
    assert b"Supplier Management Report" in response.content


def test_generate_report_accepts_numeric_ids(client, supplier_factory):
    supplier_factory()
    response = client.post("/generateReport", json={"userIds": [1, 2]})
    assert response.status_code == 200
    assert response.content.startswith(b"%PDF")


def test_render_failure_is_a_report_error(client, supplier_factory, monkeypatch):
    def broken_render(suppliers, generated_at=None):
        raise ValueError("font missing")

    monkeypatch.setattr(report, "render_report", broken_render)
    supplier = supplier_factory()
    response = client.post("/generateReport", json={"userIds": [supplier["id"]]})
    assert response.status_code == 500
    assert response.json() == {"code": "REPORT_ERROR", "message": "Error generating report"}


def test_rendering_runs_off_the_event_loop(client, supplier_factory, monkeypatch):
    seen = {}

    def recording_render(suppliers, generated_at=None):
        try:
            asyncio.get_running_loop()
            seen["on_loop"] = True
        except RuntimeError:
            seen["on_loop"] = False
        seen["names"] = [s.name for s in suppliers]
        return b"%PDF-1.4 stub"

    monkeypatch.setattr(report, "render_report", recording_render)
    supplier = supplier_factory(name="Ann")
    response = client.post("/generateReport", json={"userIds": [supplier["id"]]})
    assert response.status_code == 200
    assert seen == {"on_loop": False, "names": ["Ann"]}
