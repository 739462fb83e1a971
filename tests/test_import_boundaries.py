"""
Import boundary guard for src/transport_admin/ui/.

Rule: UI files talk to the dashboard API and the backend over HTTP only.
They must never import FastAPI, the services layer or the upstream gateway;
DTOs come from ``transport_admin.api.schemas``.
"""

import ast
from collections.abc import Callable
from pathlib import Path

# ---------------------------------------------------------------------------
# Configuration
# ---------------------------------------------------------------------------

REPO_ROOT = Path(__file__).parent.parent
PACKAGE_ROOT = REPO_ROOT / "src" / "transport_admin"
UI_ROOT = PACKAGE_ROOT / "ui"

# Any `import X` or `from X ...` where X matches one of these is a violation.
BANNED_MODULES = {
    "fastapi",
    "starlette",
    "uvicorn",
}
BANNED_PREFIXES = (
    "transport_admin.services",
    "transport_admin.infra",
    "transport_admin.api.app",
    "transport_admin.api.routers",
    "transport_admin.api.deps",
)

# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _is_banned_import(module_name: str) -> bool:
    """Return True if the module name is in the banned set or starts with a banned prefix."""
    if module_name.split(".")[0] in BANNED_MODULES:
        return True
    return any(module_name.startswith(prefix) for prefix in BANNED_PREFIXES)


def _file_imports_any(path: Path, is_banned: Callable[[str], bool]) -> bool:
    """Parse *path* with AST and return True if any import matches *is_banned*."""
    source = path.read_text(encoding="utf-8")
    try:
        tree = ast.parse(source, filename=str(path))
    except SyntaxError:
        return True

    for node in ast.walk(tree):
        if isinstance(node, ast.Import):
            for alias in node.names:
                if is_banned(alias.name):
                    return True
        elif isinstance(node, ast.ImportFrom):
            if is_banned(node.module or ""):
                return True

    return False


def _repo_relative(path: Path) -> str:
    """Return a POSIX-style path relative to the repo root."""
    return path.relative_to(REPO_ROOT).as_posix()


# ---------------------------------------------------------------------------
# Tests
# ---------------------------------------------------------------------------


def test_ui_import_boundaries() -> None:
    violations = [
        _repo_relative(py_file)
        for py_file in sorted(UI_ROOT.rglob("*.py"))
        if _file_imports_any(py_file, _is_banned_import)
    ]
    assert not violations, (
        "UI files must go through the HTTP client, not the server side:\n"
        + "\n".join(f"  {v}" for v in violations)
    )


def test_service_import_boundaries() -> None:
    """Service files must not import fastapi or streamlit."""
    services_root = PACKAGE_ROOT / "services"
    _is_web = lambda m: m.startswith(("fastapi", "streamlit"))  # noqa: E731
    violations = [
        _repo_relative(py_file)
        for py_file in sorted(services_root.rglob("*.py"))
        if _file_imports_any(py_file, _is_web)
    ]
    assert not violations, (
        "Service files must not import fastapi or streamlit:\n"
        + "\n".join(f"  {v}" for v in violations)
    )
