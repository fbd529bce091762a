import pytest
from starlette.testclient import TestClient

from beautycam.main import app
from beautycam.models.presets import DEFAULT_PRESET_KEY, PRESETS_BY_CONCERN


@pytest.fixture
def client():
    return TestClient(app)


@pytest.fixture(params=[DEFAULT_PRESET_KEY, *PRESETS_BY_CONCERN.keys()])
def preset_key(request):
    return request.param
