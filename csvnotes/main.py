from pathlib import Path
from typing import Optional

import uvicorn
from fastapi import FastAPI, File, Request, UploadFile
from fastapi.responses import HTMLResponse
from fastapi.staticfiles import StaticFiles
from fastapi.templating import Jinja2Templates

from . import __version__
from .config import get_settings
from .logging_setup import get_logger
from .models import HealthResponse
from .transform import build_result

logger = get_logger(__name__)

BASE_DIR = Path(__file__).parent

app = FastAPI(
    title="csv-notes",
    description="Turn an uploaded CSV of links and notes into a readable page",
    version=__version__,
)
app.mount("/static", StaticFiles(directory=BASE_DIR / "static"), name="static")

templates = Jinja2Templates(directory=BASE_DIR / "templates")


@app.get("/health", response_model=HealthResponse)
def health():
    return {"ok": True}


@app.get("/", response_class=HTMLResponse)
def index(request: Request):
    return templates.TemplateResponse(request, "index.html", {"title": get_settings().title})


@app.post("/", response_class=HTMLResponse)
async def upload(request: Request, file: Optional[UploadFile] = File(None)):
    raw = None
    if file is not None and file.filename:
        raw = await file.read()
        logger.info(f"Received upload {file.filename!r} ({len(raw)} bytes)")

    result = build_result(raw)

    context = result.to_context()
    context["title"] = get_settings().title
    return templates.TemplateResponse(request, "result.html", context)


def run():
    settings = get_settings()
    uvicorn.run(app, host=settings.host, port=settings.port)
