"""Tests to verify layered architecture structure."""

from pathlib import Path

import pytest

# Compute project root relative to this test file
PROJECT_ROOT = Path(__file__).parent.parent.parent


@pytest.fixture
def package_path() -> Path:
    """Return the package directory path."""
    return PROJECT_ROOT / "consensus_signal"


def test_main_layers_exist(package_path: Path) -> None:
    """Verify all main layer directories exist."""
    for layer in ["domain", "application", "infrastructure", "config", "bootstrap"]:
        assert (package_path / layer).is_dir(), f"Missing layer: {layer}"
        assert (package_path / layer / "__init__.py").is_file(), (
            f"Missing {layer}/__init__.py"
        )


def test_domain_subdirectories_exist(package_path: Path) -> None:
    """Verify domain layer has required subdirectories."""
    domain = package_path / "domain"
    for subdir in ["errors", "models", "ports", "services"]:
        assert (domain / subdir / "__init__.py").is_file(), f"Missing {subdir}/__init__.py"


def test_domain_has_no_outer_layer_imports(package_path: Path) -> None:
    """Verify domain layer imports nothing from outer layers."""
    forbidden = [
        "consensus_signal.application",
        "consensus_signal.infrastructure",
        "consensus_signal.bootstrap",
        "consensus_signal.config",
    ]

    for py_file in (package_path / "domain").rglob("*.py"):
        content = py_file.read_text()
        for module in forbidden:
            assert f"from {module}" not in content, f"{py_file} imports {module}"
            assert f"import {module}" not in content, f"{py_file} imports {module}"


def test_application_has_no_infrastructure_imports(package_path: Path) -> None:
    """Application services depend on ports, not adapters."""
    for py_file in (package_path / "application").rglob("*.py"):
        content = py_file.read_text()
        assert "consensus_signal.infrastructure" not in content, (
            f"{py_file} imports infrastructure"
        )
