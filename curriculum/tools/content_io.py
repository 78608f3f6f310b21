"""Content sources: Python data modules, JSON exports and the roadmap catalog."""
import importlib
import json
import logging
import re
from collections.abc import Iterable
from pathlib import Path
from types import ModuleType
from typing import Any, Optional

from curriculum.config import get_settings
from curriculum.models.content import Roadmap
from curriculum.models.report import Finding
from curriculum.tools.normalize import ModuleInput, coerce_module, merge_supplements, module_key
from curriculum.tools.registry import Registry, load
from curriculum.tools.validate import PhaseIdScope


logger = logging.getLogger(__name__)


def import_content_modules(package: str, names: Iterable[str]) -> list:
    """Import ``package.<name>`` for each name, preserving order."""
    return [importlib.import_module(f"{package}.{name}") for name in names]


def load_json_module(path: Path) -> tuple[str, Any]:
    """
    Read one phase module exported as JSON.

    Returns:
        (key, raw) where key is the file stem

    Raises:
        FileNotFoundError: If the file does not exist
        ValueError: If the file is not valid JSON
    """
    if not path.exists():
        raise FileNotFoundError(f"Content module not found: {path}")
    try:
        raw = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        raise ValueError(f"{path.name} is not valid JSON: {e}") from e
    return path.stem, raw


def load_json_dir(content_dir: Path) -> list[tuple[str, Any]]:
    """
    Read every ``*.json`` module in a directory.

    Files are ordered naturally by name (``phase2`` before ``phase10``), which
    is the curriculum order for exported corpora.

    Raises:
        FileNotFoundError: If the directory is missing or holds no JSON files
    """
    if not content_dir.is_dir():
        raise FileNotFoundError(f"Content directory not found: {content_dir}")

    json_files = sorted(content_dir.glob("*.json"), key=lambda p: _natural_key(p.stem))
    if not json_files:
        raise FileNotFoundError(f"No JSON content modules found in {content_dir}")

    return [load_json_module(path) for path in json_files]


def roadmap_modules(roadmap: Roadmap, package: str) -> tuple[list[ModuleInput], list[Finding]]:
    """
    Import the phase modules of a roadmap, merging supplement modules.

    Nothing here raises for bad content. A module named in the index that
    does not exist, a malformed parent or supplement, or a supplement that
    carries its own Phase envelope is recorded as a finding and left out;
    pass the findings to ``load()`` so the corpus fails with all of them.

    Returns:
        (modules in roadmap order, findings)
    """
    items: list[ModuleInput] = []
    findings: list[Finding] = []
    for entry in roadmap.modules:
        parent = _import_content_module(package, entry.module, findings)
        if parent is None:
            continue
        if not entry.supplements:
            items.append(parent)
            continue

        parent_module, parent_findings = coerce_module(parent, roadmap.slug)
        findings.extend(parent_findings)
        if parent_module is None:
            continue

        resolved = []
        for name in entry.supplements:
            supplement = _import_content_module(package, name, findings)
            if supplement is None:
                continue
            module, supplement_findings = coerce_module(supplement, roadmap.slug)
            findings.extend(supplement_findings)
            if module is None:
                continue
            if module.shape != "topics":
                findings.append(Finding(
                    severity="error",
                    code="malformed-module",
                    message=(
                        f"Supplement module {module.key!r} has a Phase envelope; "
                        f"only bare topic arrays can be merged into {parent_module.key!r}"
                    ),
                    modules=[module.key, parent_module.key],
                ))
                continue
            resolved.append(module)

        items.append(merge_supplements(parent_module, resolved))
    return items, findings


class Catalog:
    """Every roadmap in a content package, each with its own Registry."""

    def __init__(self, roadmaps: list[Roadmap], registries: dict[str, Registry]):
        self._roadmaps = {r.slug: r for r in roadmaps}
        self._registries = registries

    def roadmaps(self) -> list[Roadmap]:
        return list(self._roadmaps.values())

    def get_roadmap(self, slug: str) -> Optional[Roadmap]:
        return self._roadmaps.get(slug)

    def registry(self, slug: str) -> Optional[Registry]:
        """Registry for a roadmap, or None for unknown or coming-soon roadmaps."""
        return self._registries.get(slug)


def read_roadmaps(package: str) -> list[Roadmap]:
    """Parse the ``ROADMAPS`` index of a content package."""
    index = importlib.import_module(f"{package}.index")
    return [Roadmap.model_validate(raw) for raw in index.ROADMAPS]


def load_catalog(
    package: Optional[str] = None,
    *,
    phase_id_scope: Optional[PhaseIdScope] = None,
    question_types: Optional[Iterable[str]] = None
) -> Catalog:
    """
    Load every published roadmap of a content package.

    Defaults come from Settings. Phase ids only need to be unique within a
    roadmap because each roadmap is loaded as its own corpus.

    Raises:
        LoadError: If any roadmap's corpus has error findings
    """
    settings = get_settings()
    package = package or settings.content_package
    phase_id_scope = phase_id_scope or settings.phase_id_scope
    question_types = question_types if question_types is not None else settings.question_types

    roadmaps = read_roadmaps(package)
    registries: dict[str, Registry] = {}
    for roadmap in roadmaps:
        if roadmap.coming_soon or not roadmap.modules:
            logger.info(f"Skipping roadmap {roadmap.slug!r}: no published phases")
            continue
        modules, findings = roadmap_modules(roadmap, package)
        registries[roadmap.slug] = load(
            modules,
            domain=roadmap.slug,
            phase_id_scope=phase_id_scope,
            question_types=question_types,
            findings=findings,
        )
    return Catalog(roadmaps, registries)


def _import_content_module(package: str, name: str, findings: list[Finding]) -> Optional[ModuleType]:
    full_name = f"{package}.{name}"
    try:
        return importlib.import_module(full_name)
    except ModuleNotFoundError as e:
        # a missing dependency inside an existing module is a real bug, not content
        if e.name != full_name:
            raise
        findings.append(Finding(
            severity="error",
            code="missing-module",
            message=f"Roadmap index names module {name!r}, but {full_name} does not exist",
            modules=[module_key(name)],
        ))
        return None


def _natural_key(name: str) -> list:
    return [int(part) if part.isdigit() else part.lower() for part in re.split(r"(\d+)", name)]
