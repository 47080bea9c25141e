"""
Smoke tests to verify basic infrastructure setup.
Run these after fresh environment setup to confirm everything works.
"""

import sys
import importlib
from pathlib import Path
import pytest

ROOT = Path(__file__).resolve().parent.parent


def test_python_version():
    """Test Python version meets requirements."""
    assert sys.version_info >= (3, 9), f"Python 3.9+ required, got {sys.version}"


def test_package_imports():
    """Test that configured packages can be imported."""
    packages = [
        "numpy",
        "pytest",
        "ringguard",
        "ringguard.core.cells",
        "ringguard.core.ring",
        "ringguard.core.survivors",
        "ringguard.demo",
    ]

    failed_imports = []
    for package in packages:
        try:
            importlib.import_module(package)
        except ImportError as e:
            failed_imports.append(f"{package}: {e}")

    if failed_imports:
        pytest.fail(f"Failed to import packages: {failed_imports}")


def test_public_api():
    """Test that the package exposes its public names."""
    import ringguard

    missing = [name for name in ringguard.__all__ if not hasattr(ringguard, name)]
    assert not missing, f"Missing exports: {missing}"
    assert ringguard.__version__ == "0.1.0"


def test_project_structure():
    """Test that required directories exist."""
    missing_dirs = [d for d in ["src", "tests", "scripts"] if not (ROOT / d).is_dir()]
    if missing_dirs:
        pytest.fail(f"Missing required directories: {missing_dirs}")


def test_tool_config_files():
    """Test that tool configuration files exist."""
    assert (ROOT / "pyproject.toml").exists(), "pyproject.toml missing"


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
