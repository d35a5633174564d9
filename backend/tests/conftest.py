"""Shared test configuration and document fixtures."""

import io

import pytest
from docx import Document

SAMPLE_RESUME = """Jane Doe
Email: jane.doe@example.com | Phone: 555-123-4567
linkedin.com/in/janedoe | github.com/janedoe

Summary
Backend engineer with 6+ years of experience building data platforms and APIs.

Experience
Senior Software Engineer | DataCorp | 2020 - Present
- Cut API latency by 40% by redesigning the caching layer in Python
- Migrated 30+ services to Docker and Kubernetes on AWS
- Saved $120000 per year in infrastructure costs
- Led a team of 4 engineers using Agile and Scrum

Software Engineer | WebWorks | 2017 - 2020
- Built React dashboards backed by SQL reporting queries
- Improved test coverage to 85% across the JavaScript codebase

Data Engineer | Insight Labs | 2015 - 2017
- Automated nightly ETL jobs that processed 2 million records each day
- Partnered with analysts to define reporting requirements for finance
- Wrote runbooks and on-call documentation for the platform team
- Mentored two junior engineers through their first production launches

Education
B.S. Computer Science | State University | 2017

Skills
Python, AWS, Docker, Kubernetes, SQL, React, JavaScript, Git

Projects
Open-source job scheduler with 500+ GitHub stars
"""

DOCX_MIME = "application/vnd.openxmlformats-officedocument.wordprocessingml.document"


def build_docx(paragraphs: list[str]) -> bytes:
    doc = Document()
    for text in paragraphs:
        doc.add_paragraph(text)
    buf = io.BytesIO()
    doc.save(buf)
    return buf.getvalue()


def build_pdf(text: str) -> bytes:
    """Build a one-page PDF showing a single line of Helvetica text."""
    stream = f"BT /F1 18 Tf 72 700 Td ({text}) Tj ET".encode("latin-1")
    objects = [
        b"<< /Type /Catalog /Pages 2 0 R >>",
        b"<< /Type /Pages /Kids [3 0 R] /Count 1 >>",
        b"<< /Type /Page /Parent 2 0 R /MediaBox [0 0 612 792] "
        b"/Contents 4 0 R /Resources << /Font << /F1 5 0 R >> >> >>",
        b"<< /Length " + str(len(stream)).encode() + b" >>\nstream\n"
        + stream + b"\nendstream",
        b"<< /Type /Font /Subtype /Type1 /BaseFont /Helvetica >>",
    ]
    out = bytearray(b"%PDF-1.4\n")
    offsets = []
    for number, body in enumerate(objects, start=1):
        offsets.append(len(out))
        out += f"{number} 0 obj\n".encode() + body + b"\nendobj\n"
    xref_at = len(out)
    out += f"xref\n0 {len(objects) + 1}\n".encode()
    out += b"0000000000 65535 f \n"
    for offset in offsets:
        out += f"{offset:010d} 00000 n \n".encode()
    out += f"trailer\n<< /Size {len(objects) + 1} /Root 1 0 R >>\n".encode()
    out += f"startxref\n{xref_at}\n%%EOF\n".encode()
    return bytes(out)


@pytest.fixture
def sample_resume() -> str:
    return SAMPLE_RESUME


@pytest.fixture
def docx_bytes() -> bytes:
    return build_docx(SAMPLE_RESUME.split("\n"))


@pytest.fixture
def pdf_bytes() -> bytes:
    return build_pdf("Jane Doe Python Engineer")
