from __future__ import annotations

from pathlib import Path

from fastapi import FastAPI, Form, Request
from fastapi.responses import HTMLResponse, JSONResponse
from fastapi.staticfiles import StaticFiles
from fastapi.templating import Jinja2Templates

from modules.base_convert.core.base import convert_base
from modules.base_convert.core.numeral import Radix
from modules.base_convert.core.system import system_info
from universe.settings import configure_templates, shared_templates_dir

app = FastAPI(title="Base Converter")

BASE_DIR = Path(__file__).parent
ROOT_DIR = BASE_DIR.parents[2]
BRAND_DIR = ROOT_DIR / "brand"
SHARED_TEMPLATES = shared_templates_dir(ROOT_DIR)

templates = Jinja2Templates(
    directory=[str(BASE_DIR / "templates"), str(SHARED_TEMPLATES)]
)
configure_templates(templates)

if BRAND_DIR.exists():
    app.mount("/brand", StaticFiles(directory=BRAND_DIR), name="brand")


@app.get("/", response_class=HTMLResponse)
def index(request: Request):
    base_path = request.url.path.rstrip("/")
    return templates.TemplateResponse(
        request,
        "index.html",
        {"base_path": base_path, "radices": list(Radix)},
    )


@app.post("/convert")
def convert(
    value: str | None = Form(None),
    base_from: str | None = Form(None),
):
    result, error = convert_base(value, base_from)
    if error:
        return JSONResponse(error, status_code=400)
    return result


@app.get("/system")
def system():
    return system_info()
