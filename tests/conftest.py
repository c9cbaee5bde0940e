"""
Shared test fixtures: test client, landmark sets, settings override.
"""

import pytest
from fastapi.testclient import TestClient

from implant_guide.config import settings
from implant_guide.main import app


@pytest.fixture
def client():
    """FastAPI test client."""
    return TestClient(app)


@pytest.fixture
def reference_landmarks():
    """Crest 20, nerve 10, 10mm wide gap, 10mm bucco-lingual, 5 deg slope."""
    return {
        "crest_level": 20,
        "nerve_level": 10,
        "mesial_x": -5,
        "distal_x": 5,
        "buccal_z": 5,
        "lingual_z": -5,
        "bone_slope": 5,
    }


@pytest.fixture
def strict_sizing(monkeypatch):
    """Reject sites where no standard length fits instead of falling back."""
    monkeypatch.setattr(settings, "ALLOW_UNDERSIZED_LENGTH", False)
