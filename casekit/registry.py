from __future__ import annotations

import logging
from importlib import metadata
from pathlib import Path
from typing import Any, Dict

import yaml

from casekit.settings import modules_path

logger = logging.getLogger(__name__)

ENTRYPOINT_GROUP = "casekit.modules"
MANIFEST_NAME = "module.yaml"


def _normalize_module(
    data: Dict[str, Any],
    *,
    source: str,
    path: Path | None = None,
    entry_point: str | None = None,
) -> Dict[str, Any] | None:
    name = data.get("name")
    if not name:
        return None

    slug = data.get("slug") or str(name).replace("_", "-")
    mount = data.get("mount") or f"/{slug}"
    if not mount.startswith("/"):
        mount = "/" + mount
    if mount != "/" and mount.endswith("/"):
        mount = mount.rstrip("/")
    public = data.get("public")
    if public is None:
        public = True

    normalized = {**data}
    normalized.update(
        {
            "name": str(name),
            "slug": slug,
            "mount": mount,
            "public": bool(public),
            "source": source,
        }
    )
    if path is not None:
        normalized["path"] = path
    if entry_point is not None:
        normalized["entry_point"] = entry_point
    return normalized


def read_manifest(manifest: Path) -> Dict[str, Any] | None:
    try:
        data = yaml.safe_load(manifest.read_text(encoding="utf-8")) or {}
    except (OSError, yaml.YAMLError) as exc:
        logger.warning("Skipping unreadable manifest %s: %s", manifest, exc)
        return None
    if not isinstance(data, dict):
        logger.warning("Skipping manifest %s: expected a mapping", manifest)
        return None
    return data


def load_filesystem_modules(path: Path | None = None) -> Dict[str, Dict[str, Any]]:
    root = path if path is not None else modules_path()
    modules: Dict[str, Dict[str, Any]] = {}
    if not root.exists():
        return modules

    for module_dir in sorted(root.iterdir()):
        if not module_dir.is_dir():
            continue
        manifest = module_dir / MANIFEST_NAME
        if not manifest.exists():
            continue
        data = read_manifest(manifest)
        if data is None:
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
        except Exception as exc:  # third-party plugin code
            logger.warning("Skipping entry point %s: %s", entry.name, exc)
            continue

        data = obj() if callable(obj) else obj
        if not isinstance(data, dict):
            logger.warning("Skipping entry point %s: expected a mapping", entry.name)
            continue

        normalized = _normalize_module(data, source="entry_point", entry_point=entry.name)
        if normalized:
            modules[normalized["name"]] = normalized
    return modules


def load_modules(path: Path | None = None) -> Dict[str, Dict[str, Any]]:
    modules = load_filesystem_modules(path)
    for name, data in load_entrypoint_modules().items():
        if name not in modules:
            modules[name] = data
    return modules
