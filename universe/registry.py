from __future__ import annotations

import logging
from importlib import metadata
from pathlib import Path
from typing import Any, Dict

import yaml

logger = logging.getLogger(__name__)

MODULES_PATH = Path(__file__).parent.parent / "modules"
ENTRYPOINT_GROUP = "sparky.modules"
MANIFEST_NAME = "module.yaml"


def _normalize_module(
    data: Dict[str, Any],
    *,
    source: str,
    path: Path | None = None,
) -> Dict[str, Any] | None:
    name = data.get("name")
    if not name:
        return None

    slug = data.get("slug") or name.replace("_", "-")
    mount = str(data.get("mount") or f"/{slug}").rstrip("/") or f"/{slug}"
    if not mount.startswith("/"):
        mount = "/" + mount
    public = data.get("public")

    normalized = {**data}
    normalized.update(
        {
            "name": name,
            "slug": slug,
            "mount": mount,
            "public": True if public is None else bool(public),
            "category": data.get("category") or "Other",
            "source": source,
        }
    )
    if path is not None:
        normalized["path"] = path
    return normalized


def load_filesystem_modules(modules_path: Path = MODULES_PATH) -> Dict[str, Dict[str, Any]]:
    modules: Dict[str, Dict[str, Any]] = {}
    if not modules_path.exists():
        return modules

    for module_dir in sorted(modules_path.iterdir()):
        manifest = module_dir / MANIFEST_NAME
        if not manifest.is_file():
            continue
        try:
            data = yaml.safe_load(manifest.read_text(encoding="utf-8")) or {}
        except yaml.YAMLError as exc:
            logger.warning("Skipping %s: invalid manifest (%s).", module_dir.name, exc)
            continue
        if not isinstance(data, dict):
            logger.warning("Skipping %s: manifest must be a mapping.", module_dir.name)
            continue
        normalized = _normalize_module(data, source="filesystem", path=module_dir)
        if normalized:
            modules[normalized["name"]] = normalized
    return modules


def load_entrypoint_modules(group: str = ENTRYPOINT_GROUP) -> Dict[str, Dict[str, Any]]:
    modules: Dict[str, Dict[str, Any]] = {}
    for entry in metadata.entry_points(group=group):
        try:
            obj = entry.load()
        except Exception as exc:
            logger.warning("Skipping entry point %s: %s", entry.name, exc)
            continue

        data = obj() if callable(obj) else obj
        if not isinstance(data, dict):
            continue

        normalized = _normalize_module(data, source="entry_point")
        if normalized:
            modules[normalized["name"]] = normalized
    return modules


def load_modules(modules_path: Path = MODULES_PATH) -> Dict[str, Dict[str, Any]]:
    modules = load_filesystem_modules(modules_path)
    for name, data in load_entrypoint_modules().items():
        modules.setdefault(name, data)
    return modules
