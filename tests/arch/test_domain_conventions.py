# tests/arch/test_domain_conventions.py
from __future__ import annotations

import ast
import dataclasses
import importlib
import inspect
import re
from collections.abc import Iterable
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[2]
SRC_ROOT = PROJECT_ROOT / "src" / "ptypes"
DOMAIN_ROOTS = (
    SRC_ROOT / "domain" / "value_objects",
    SRC_ROOT / "domain" / "entities",
)

GOOGLE_STYLE_RE = re.compile(r"\b(Args|Attributes):", re.MULTILINE)

FORBIDDEN_IMPORT_PREFIXES = (
    "logging",
    "ptypes.application",
    "ptypes.infrastructure",
    "ptypes.config",
    "ptypes.bootstrap",
)


def _iter_domain_files() -> Iterable[Path]:
    for root in DOMAIN_ROOTS:
        for path in root.rglob("*.py"):
            if path.name == "__init__.py":
                continue
            yield path


def _module_name_from_path(path: Path) -> str:
    rel = path.relative_to(SRC_ROOT)
    return "ptypes." + ".".join(rel.with_suffix("").parts)


def test_domain_types_have_no_forbidden_imports() -> None:
    violations: list[str] = []

    for path in _iter_domain_files():
        tree = ast.parse(path.read_text(encoding="utf-8"))
        module_name = _module_name_from_path(path)

        for node in ast.walk(tree):
            if isinstance(node, ast.Import):
                for alias in node.names:
                    if alias.name.startswith(FORBIDDEN_IMPORT_PREFIXES):
                        violations.append(f"{module_name} imports forbidden module {alias.name}")
            elif (
                isinstance(node, ast.ImportFrom)
                and node.module
                and node.module.startswith(FORBIDDEN_IMPORT_PREFIXES)
            ):
                violations.append(f"{module_name} imports forbidden module {node.module}")

    if violations:
        raise AssertionError("Forbidden imports in domain types:\n" + "\n".join(sorted(violations)))


def test_domain_types_have_google_style_docstrings_and_post_init() -> None:
    violations: list[str] = []

    for path in _iter_domain_files():
        module_name = _module_name_from_path(path)
        module = importlib.import_module(module_name)

        for name, obj in inspect.getmembers(module, inspect.isclass):
            if name.startswith("_") or obj.__module__ != module.__name__:
                continue

            doc = inspect.getdoc(obj) or ""
            if not GOOGLE_STYLE_RE.search(doc):
                violations.append(
                    f"{module_name}.{name} is missing a Google-style docstring "
                    "(expected 'Args:' or 'Attributes:' section)."
                )

            # Frozen dataclasses validate in __post_init__; nothing can fix them later.
            if (
                dataclasses.is_dataclass(obj)
                and obj.__dataclass_params__.frozen  # type: ignore[attr-defined]
                and "__post_init__" not in obj.__dict__
            ):
                violations.append(
                    f"{module_name}.{name} is a frozen dataclass but does not define "
                    "__post_init__ to enforce invariants."
                )

    if violations:
        raise AssertionError(
            "Domain type convention violations:\n" + "\n".join(sorted(violations))
        )
