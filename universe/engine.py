from __future__ import annotations

import logging
from importlib import import_module
from pathlib import Path
from typing import Any

from fastapi import FastAPI, HTTPException, Request
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates

from universe.errors import ValidationNormalizeMiddleware
from universe.registry import load_modules
from universe.settings import configure_templates, shared_templates_dir

logger = logging.getLogger(__name__)

CATEGORY_DESCRIPTIONS = {
    "Numbers": "Convert and inspect numbers across bases.",
    "Other": "Useful modules that do not fit a core category.",
}
DEFAULT_CATEGORY_DESCRIPTION = "Practical utilities for quick tasks."


def _slugify(value: str) -> str:
    return value.strip().lower().replace(" ", "-")


def build_categories(modules: dict[str, dict[str, Any]] | None = None) -> list[dict[str, Any]]:
    if modules is None:
        modules = load_modules()
    grouped: dict[str, list[dict[str, Any]]] = {}
    for module in modules.values():
        if not module.get("public", True):
            continue
        grouped.setdefault(str(module["category"]), []).append(module)

    categories: list[dict[str, Any]] = []
    for category, items in sorted(grouped.items(), key=lambda item: item[0].lower()):
        items.sort(key=lambda item: item.get("title") or item["name"])
        categories.append(
            {
                "name": category,
                "slug": _slugify(category),
                "description": CATEGORY_DESCRIPTIONS.get(category, DEFAULT_CATEGORY_DESCRIPTION),
                "modules": items,
            }
        )
    return categories


def import_attr(path: str) -> Any:
    if ":" not in path:
        raise ValueError(f"Invalid entrypoint '{path}'. Expected module:attr.")
    module_path, attr = path.split(":", 1)
    module = import_module(module_path)
    return getattr(module, attr)


def build_app() -> FastAPI:
    app = FastAPI(title="Sparky Universe")
    app.add_middleware(ValidationNormalizeMiddleware)

    root_dir = Path(__file__).parent.parent
    templates = Jinja2Templates(directory=str(shared_templates_dir(root_dir)))
    configure_templates(templates)

    @app.get("/", response_class=HTMLResponse)
    def universe_index(request: Request):
        base_path = request.scope.get("root_path", "").rstrip("/")
        return templates.TemplateResponse(
            request,
            "index.html",
            {"categories": build_categories(), "base_path": base_path},
        )

    @app.get("/category/{slug}")
    def category_index(slug: str):
        category = next((item for item in build_categories() if item["slug"] == slug), None)
        if not category:
            raise HTTPException(status_code=404, detail="Category not found")
        return {
            "name": category["name"],
            "description": category["description"],
            "modules": [
                {"name": item["name"], "title": item.get("title"), "mount": item["mount"]}
                for item in category["modules"]
            ],
        }

    for meta in load_modules().values():
        api_entry = (meta.get("entrypoints") or {}).get("api")
        if not api_entry:
            continue
        try:
            subapp = import_attr(api_entry)
        except (ImportError, AttributeError, ValueError) as exc:
            logger.warning("Could not mount %s from %s: %s", meta["name"], api_entry, exc)
            continue
        app.mount(meta["mount"], subapp)
        logger.debug("Mounted %s at %s", meta["name"], meta["mount"])

    return app
