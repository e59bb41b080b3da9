from __future__ import annotations

import logging
from pathlib import Path

from fastapi import FastAPI, Form, Request
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates

from casekit.errors import ValidationNormalizeMiddleware, error_response
from casekit.settings import shared_templates_dir
from modules.case_convert.core.case import (
    CASE_TYPES,
    UnsupportedCaseTypeError,
    convert_case,
    transform_cases,
)
from modules.case_convert.core.words import extract_words

logger = logging.getLogger(__name__)

app = FastAPI(title="Case Converter")
app.add_middleware(ValidationNormalizeMiddleware)

BASE_DIR = Path(__file__).parent
ROOT_DIR = BASE_DIR.parents[2]
SHARED_TEMPLATES = shared_templates_dir(ROOT_DIR)

templates = Jinja2Templates(
    directory=[str(BASE_DIR / "templates"), str(SHARED_TEMPLATES)]
)


@app.get("/", response_class=HTMLResponse)
def index(request: Request):
    base_path = request.url.path.rstrip("/")
    return templates.TemplateResponse(
        request,
        "index.html",
        {"base_path": base_path, "case_types": CASE_TYPES},
    )


@app.get("/case-types")
def case_types():
    return {"case_types": list(CASE_TYPES)}


@app.post("/convert")
def convert(text: str | None = Form(None), case_type: str | None = Form(None)):
    if not case_type or not case_type.strip():
        return error_response("Case type is required.")
    case_type = case_type.strip()
    try:
        output = convert_case(text or "", case_type)
    except UnsupportedCaseTypeError as exc:
        logger.info("Rejected case type %r", exc.case_type)
        return error_response(str(exc))
    return {"input": text or "", "case_type": case_type, "output": output}


@app.post("/words")
def words(text: str | None = Form(None)):
    found = extract_words(text or "")
    return {"words": found, "word_count": len(found)}


@app.post("/transform")
def transform(text: str | None = Form(None)):
    result, error = transform_cases(text)
    if error:
        return error_response(error)
    return result
