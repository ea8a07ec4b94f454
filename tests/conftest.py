"""
Pytest configuration and fixtures for pkcs11-attrdesc tests.
"""

import sys
from pathlib import Path

import pytest

# Add src directory to Python path to allow importing pkcs11_attrdesc
src_path = Path(__file__).parent.parent / "src"
if str(src_path) not in sys.path:
    sys.path.insert(0, str(src_path))

from pkcs11_attrdesc import reset_default_registry  # noqa: E402


@pytest.fixture
def fresh_default_registry():
    """Drop the cached default registry before and after the test."""
    reset_default_registry()
    yield
    reset_default_registry()
