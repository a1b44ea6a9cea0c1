from fastapi.testclient import TestClient
from csvnotes.main import app

client = TestClient(app)

SAMPLE_CSV = (
    "Note,URL,Notable,Paywall\n"
    "Big news. More details follow.,https://x.com/u/status/1,TRUE,checked\n"
    '"Quiet day, nothing else",https://www.example.com/page?x=1,,\n'
)


def test_health():
    r = client.get("/health")
    assert r.status_code == 200
    assert r.json() == {"ok": True}


def test_upload_form():
    r = client.get("/")
    assert r.status_code == 200
    assert 'enctype="multipart/form-data"' in r.text
    assert 'name="file"' in r.text


def test_upload_renders_notes():
    files = {"file": ("notes.csv", SAMPLE_CSV.encode("utf-8"), "text/csv")}
    r = client.post("/", files=files)
    assert r.status_code == 200

    assert "<strong>Big news.</strong> More details follow." in r.text
    assert ">x.com/u</a>" in r.text
    assert "(paywall)" in r.text
    assert "Quiet day, nothing else" in r.text
    assert ">example.com</a>" in r.text
    assert 'title="example.com/page?x=1"' in r.text
    assert "Error processing file" not in r.text


def test_upload_header_only_is_not_an_error():
    files = {"file": ("empty.csv", b"Note,URL,Notable,Paywall\n", "text/csv")}
    r = client.post("/", files=files)
    assert r.status_code == 200
    assert "No rows found." in r.text
    assert "Error processing file" not in r.text


def test_upload_without_file_shows_error():
    r = client.post("/")
    assert r.status_code == 200
    assert "Error processing file: No file uploaded" in r.text


def test_upload_malformed_csv_shows_error():
    raw = b'Note,URL\n"never closed,https://example.com\n'
    files = {"file": ("bad.csv", raw, "text/csv")}
    r = client.post("/", files=files)
    assert r.status_code == 200
    assert "Error processing file:" in r.text
    assert 'class="notes"' not in r.text


def test_upload_escapes_note_text():
    raw = "Note,URL,Notable,Paywall\n<script>alert(1)</script>,https://example.com,,\n".encode("utf-8")
    files = {"file": ("x.csv", raw, "text/csv")}
    r = client.post("/", files=files)
    assert "<script>alert(1)</script>" not in r.text
    assert "&lt;script&gt;" in r.text


def test_upload_latin1_file_is_decoded():
    # Include a Latin-1 character to force non-UTF-8 handling
    raw = "Note,URL,Notable,Paywall\nCafé opens in Montréal,https://example.com,,\n".encode("latin-1")
    files = {"file": ("latin.csv", raw, "text/csv")}
    r = client.post("/", files=files)
    assert r.status_code == 200
    assert "Error processing file" not in r.text
    assert "Montr" in r.text
    assert "opens in" in r.text
