import io
import pytest
from app.api.deps import get_queue


def _upload(client, filename: str, b: bytes, mime: str) -> dict:
    files = {"file": (filename, io.BytesIO(b), mime)}
    r = client.post("/api/upload", files=files)
    assert r.status_code == 200, r.text
    return r.json()


def test_health_ok(client):
    r = client.get("/api/health")
    assert r.status_code == 200
    assert r.json()["status"] == "ok"


def test_analyze_text(client):
    r = client.post("/api/analyze", json={"text": "This is amazing! Click here to learn more. #great"})
    assert r.status_code == 200, r.text
    data = r.json()
    assert data["success"] is True
    assert data["analysis"]["hashtags"]["existing"] == ["#great"]
    assert data["analysis"]["engagement"]["factors"]["has_call_to_action"] is True
    assert data["suggestions"]["call_to_action"]["detected"] is True
    assert data["suggestions"]["overall"]["rating"] in {"Poor", "Fair", "Good", "Excellent"}


@pytest.mark.parametrize("body,status", [
    ({"text": "   "}, 400),
    ({"text": ""}, 400),
    ({}, 422),
    ({"text": 42}, 422),
])
def test_analyze_rejects_bad_input(client, body, status):
    assert client.post("/api/analyze", json=body).status_code == status


@pytest.mark.parametrize("kind", ["pdf", "png"])
def test_upload_then_poll_job(client, kind, sample_pdf_bytes, sample_png_bytes):
    if kind == "pdf":
        payload = _upload(client, "post.pdf", sample_pdf_bytes, "application/pdf")
    else:
        payload = _upload(client, "post.png", sample_png_bytes, "image/png")

    get_queue().join()

    r = client.get(f"/api/jobs/{payload['job_id']}")
    assert r.status_code == 200, r.text
    job = r.json()["job"]
    assert job["status"] == "completed", job.get("error")
    assert job["file_id"] == payload["file"]["id"]
    assert job["type"] == ("pdf" if kind == "pdf" else "ocr")
    result = job["result"]
    assert result["analysis"]["text"] == result["text"]
    assert "improvements" in result["suggestions"]
    if kind == "png":
        assert result["metadata"]["confidence"] == 84.0


def test_jobs_listing_and_delete(client, sample_pdf_bytes):
    payload = _upload(client, "post.pdf", sample_pdf_bytes, "application/pdf")
    get_queue().join()
    job_id, file_id = payload["job_id"], payload["file"]["id"]

    r = client.get("/api/jobs", params={"file_id": file_id})
    assert r.status_code == 200
    assert r.json()["count"] == 1
    assert r.json()["jobs"][0]["id"] == job_id

    assert client.get("/api/jobs").json()["count"] >= 1

    assert client.delete(f"/api/jobs/{job_id}").status_code == 200
    assert client.get(f"/api/jobs/{job_id}").status_code == 404
    assert client.delete(f"/api/jobs/{job_id}").status_code == 404


def test_unknown_job_is_404(client):
    r = client.get("/api/jobs/not-a-job")
    assert r.status_code == 404


def test_extract_endpoint(client, sample_pdf_bytes):
    file_id = _upload(client, "post.pdf", sample_pdf_bytes, "application/pdf")["file"]["id"]
    r = client.post(f"/api/extract?file_id={file_id}")
    assert r.status_code == 200, r.text
    data = r.json()
    assert data["file_type"] == "pdf"
    assert "#great" in data["text"]
    assert data["metadata"]["pages"] == 1


def test_extract_unknown_file(client):
    assert client.post("/api/extract?file_id=missing").status_code == 404
