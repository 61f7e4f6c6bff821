import io

import pytest
from fastapi.testclient import TestClient

from app.settings import Settings


def make_pdf_bytes(text=None):
    """Build a one-page PDF; without ``text`` the page has no text layer."""
    content = b""
    if text:
        escaped = text.replace("\\", "\\\\").replace("(", "\\(").replace(")", "\\)")
        content = f"BT /F1 12 Tf 72 720 Td ({escaped}) Tj ET".encode("latin-1")
    objects = [
        b"<< /Type /Catalog /Pages 2 0 R >>",
        b"<< /Type /Pages /Kids [3 0 R] /Count 1 >>",
        b"<< /Type /Page /Parent 2 0 R /MediaBox [0 0 612 792] "
        b"/Resources << /Font << /F1 5 0 R >> >> /Contents 4 0 R >>",
        b"<< /Length %d >>\nstream\n" % len(content) + content + b"\nendstream",
        b"<< /Type /Font /Subtype /Type1 /BaseFont /Helvetica >>",
    ]
    out = io.BytesIO()
    out.write(b"%PDF-1.4\n")
    offsets = []
    for i, body in enumerate(objects, start=1):
        offsets.append(out.tell())
        out.write(b"%d 0 obj\n" % i + body + b"\nendobj\n")
    xref_at = out.tell()
    out.write(b"xref\n0 %d\n" % (len(objects) + 1))
    out.write(b"0000000000 65535 f \n")
    for off in offsets:
        out.write(b"%010d 00000 n \n" % off)
    out.write(b"trailer\n<< /Size %d /Root 1 0 R >>\n" % (len(objects) + 1))
    out.write(b"startxref\n%d\n%%%%EOF\n" % xref_at)
    return out.getvalue()


SAMPLE_ANALYSIS = {
    "ats_score": 82,
    "structure": "Clear sections with consistent headers.",
    "format": "Single column, readable fonts.",
    "keywords": ["python", "fastapi", "docker"],
    "suggestions": ["Quantify achievements", "Add a skills summary"],
}


class FakeExtractor:
    def __init__(self, text="Jane Doe\nSoftware Engineer\nPython, FastAPI", error=None):
        self.text = text
        self.error = error
        self.calls = []

    def extract_text(self, data):
        self.calls.append(data)
        if self.error:
            raise self.error
        return self.text


class FakeRequester:
    def __init__(self, result=None, error=None):
        self.result = SAMPLE_ANALYSIS if result is None else result
        self.error = error
        self.calls = []

    async def request_analysis(self, text, schema):
        self.calls.append((text, schema))
        if self.error:
            raise self.error
        return self.result


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep a developer's shell or .env values out of Settings()."""
    for name in Settings.model_fields:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def settings():
    return Settings(GEMINI_API_KEY="test-key", MAX_UPLOAD_BYTES=10 * 1024 * 1024, CORS_ORIGINS="*")


@pytest.fixture
def extractor():
    return FakeExtractor()


@pytest.fixture
def requester():
    return FakeRequester()


@pytest.fixture
def make_client(settings):
    """Build a TestClient around an app wired with the given collaborators."""
    from app.main import create_app

    def _make(extractor, requester, app_settings=None):
        app = create_app(app_settings or settings, extractor=extractor, requester=requester)
        return TestClient(app, raise_server_exceptions=False)

    return _make


@pytest.fixture
def client(make_client, extractor, requester):
    return make_client(extractor, requester)


@pytest.fixture
def pdf_upload():
    def _upload(data=None, content_type="application/pdf", name="resume.pdf"):
        data = make_pdf_bytes("Jane Doe") if data is None else data
        return {"file": (name, io.BytesIO(data), content_type)}

    return _upload
