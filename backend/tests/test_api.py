import pytest
from fastapi.testclient import TestClient

from api.router import limiter
from conftest import DOCX_MIME, SAMPLE_RESUME, build_docx
from main import app

client = TestClient(app)


@pytest.fixture(autouse=True)
def _reset_rate_limits():
    limiter.reset()


def test_health():
    response = client.get("/health")
    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "ok"


def test_analyze_quick():
    response = client.post(
        "/analyze/quick",
        json={
            "resume_text": "Experienced Python developer with React and Docker skills.",
            "job_description": "Looking for a Python developer with Java and Docker.",
        },
    )
    assert response.status_code == 200
    data = response.json()
    assert data["breakdown"]["keyword_match"] == 23  # 2/3 * 35
    assert data["keyword_analysis"]["matched"] == ["python", "docker"]
    assert data["keyword_analysis"]["missing"] == ["java"]
    assert data["overall_score"] == sum(data["breakdown"].values())
    assert data["rating"] in ("Excellent", "Good", "Fair", "Poor")
    assert isinstance(data["recommendations"], list)
    assert isinstance(data["formatting_issues"], list)


def test_analyze_quick_without_job_description():
    response = client.post("/analyze/quick", json={"resume_text": SAMPLE_RESUME})
    assert response.status_code == 200
    data = response.json()
    assert data["overall_score"] == 90
    assert data["breakdown"]["keyword_match"] == 25
    assert data["sections"]["missing"] == []


@pytest.mark.parametrize("resume_text", ["", "   \n  "])
def test_analyze_quick_blank_resume(resume_text):
    response = client.post("/analyze/quick", json={"resume_text": resume_text})
    assert response.status_code == 400
    assert response.json()["detail"] == "Resume text is empty"


def test_analyze_quick_job_description_too_long():
    response = client.post(
        "/analyze/quick",
        json={"resume_text": "Python", "job_description": "x" * 10001},
    )
    assert response.status_code == 422


def test_analyze_upload_docx():
    response = client.post(
        "/analyze",
        files={"resume_file": ("resume.docx", build_docx(SAMPLE_RESUME.split("\n")), DOCX_MIME)},
        data={"job_description": "Python, Java, AWS, Docker"},
    )
    assert response.status_code == 200
    data = response.json()
    assert data["keyword_analysis"]["matched"] == ["python", "java", "aws", "docker"]
    assert data["breakdown"]["keyword_match"] == 35


def test_analyze_upload_without_job_description():
    response = client.post(
        "/analyze",
        files={"resume_file": ("resume.docx", build_docx(SAMPLE_RESUME.split("\n")), DOCX_MIME)},
    )
    assert response.status_code == 200
    assert response.json()["breakdown"]["keyword_match"] == 25


def test_analyze_upload_unsupported_type():
    response = client.post(
        "/analyze",
        files={"resume_file": ("resume.txt", b"plain text resume", "text/plain")},
    )
    assert response.status_code == 400
    assert response.json()["detail"] == "Please upload a PDF or DOCX file"


def test_analyze_upload_corrupt_pdf():
    response = client.post(
        "/analyze",
        files={"resume_file": ("resume.pdf", b"not really a pdf", "application/pdf")},
    )
    assert response.status_code == 400
    assert response.json()["detail"] == "Could not parse PDF file"


def test_analyze_upload_empty_document():
    response = client.post(
        "/analyze",
        files={"resume_file": ("resume.docx", build_docx([]), DOCX_MIME)},
    )
    assert response.status_code == 400
    assert response.json()["detail"] == "No text could be extracted from the file"


def test_analyze_upload_job_description_too_long():
    response = client.post(
        "/analyze",
        files={"resume_file": ("resume.docx", build_docx(["Python"]), DOCX_MIME)},
        data={"job_description": "x" * 10001},
    )
    assert response.status_code == 400
