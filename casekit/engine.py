from __future__ import annotations

import logging
from importlib import import_module
from pathlib import Path
from typing import Any, Dict, List

from fastapi import FastAPI, HTTPException, Request
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates

from casekit import __version__
from casekit.errors import ValidationNormalizeMiddleware
from casekit.registry import load_modules

logger = logging.getLogger(__name__)

CATEGORY_DESCRIPTIONS = {
    "Text": "Reshape identifiers, file names and sentences.",
    "Utilities": "Small, practical tools for quick one-off tasks.",
    "Other": "Useful modules that do not fit a core category.",
}
DEFAULT_CATEGORY_DESCRIPTION = "Practical utilities for quick tasks."


def _slugify(value: str) -> str:
    return value.strip().lower().replace(" ", "-")


def build_categories(modules: Dict[str, Dict[str, Any]] | None = None) -> List[Dict[str, Any]]:
    if modules is None:
        modules = load_modules()
    public = [module for module in modules.values() if module.get("public", True)]

    grouped: Dict[str, List[Dict[str, Any]]] = {}
    for module in public:
        category = str(module.get("category") or "Other")
        grouped.setdefault(category, []).append(module)

    categories: List[Dict[str, Any]] = []
    for category, items in sorted(grouped.items(), key=lambda item: item[0].lower()):
        items.sort(key=lambda item: item.get("title") or item.get("name", ""))
        categories.append(
            {
                "name": category,
                "slug": _slugify(category),
                "description": CATEGORY_DESCRIPTIONS.get(
                    category, DEFAULT_CATEGORY_DESCRIPTION
                ),
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


def mount_modules(app: FastAPI, modules: Dict[str, Dict[str, Any]]) -> List[str]:
    """Mount each manifest's ``entrypoints.api`` app; return the mounted names."""
    mounted: List[str] = []
    for meta in modules.values():
        api_entry = (meta.get("entrypoints") or {}).get("api")
        if not api_entry:
            continue
        try:
            subapp = import_attr(api_entry)
        except (ImportError, AttributeError, ValueError) as exc:
            logger.warning("Skipping module %s: %s", meta["name"], exc)
            continue
        logger.debug("Mounting %s at %s", meta["name"], meta["mount"])
        app.mount(meta["mount"], subapp)
        mounted.append(meta["name"])
    return mounted


def build_app(modules: Dict[str, Dict[str, Any]] | None = None) -> FastAPI:
    if modules is None:
        modules = load_modules()

    app = FastAPI(title="casekit", version=__version__)
    app.add_middleware(ValidationNormalizeMiddleware)
    templates = Jinja2Templates(directory=str(Path(__file__).parent / "templates"))

    def render(request: Request, name: str, **context: Any) -> HTMLResponse:
        context["base_path"] = request.scope.get("root_path", "").rstrip("/")
        return templates.TemplateResponse(request, name, context)

    @app.get("/", response_class=HTMLResponse)
    def index(request: Request):
        return render(request, "index.html", categories=build_categories(modules))

    @app.get("/category/{slug}", response_class=HTMLResponse)
    def category_index(request: Request, slug: str):
        by_slug = {item["slug"]: item for item in build_categories(modules)}
        if slug not in by_slug:
            raise HTTPException(status_code=404, detail="Category not found")
        return render(request, "category.html", category=by_slug[slug])

    mount_modules(app, modules)
    return app
