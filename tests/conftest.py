"""
Pytest configuration and fixtures.
"""

import pytest
from fastapi.testclient import TestClient

from picmenu.api.deps import get_menu_processor, get_storage_service
from picmenu.main import app
from picmenu.services.menu_processor import MenuProcessor
from tests.fakes import FakeExtractor, FakeImageGenerator, FakeStorage, RecordingSleep, menu_items


@pytest.fixture
def image_generator():
    return FakeImageGenerator()


@pytest.fixture
def recording_sleep(image_generator):
    # Shares the generator's event log so sleeps show up between batches
    return RecordingSleep(events=image_generator.events)


@pytest.fixture
def make_processor(image_generator, recording_sleep):
    """Build a processor around fakes; pass ``items`` or ``error`` for the extractor."""
    def _make(items=None, error=None, **kwargs):
        extractor = FakeExtractor(items=items, error=error)
        options = {"batch_size": 3, "batch_delay": 1.0, "max_duration": 5.0, "sleep": recording_sleep}
        options.update(kwargs)
        return MenuProcessor(extractor, image_generator, **options), extractor
    return _make


@pytest.fixture
def storage():
    return FakeStorage()


@pytest.fixture
def install_processor(make_processor):
    """Serve requests with a fake-backed processor; returns its extractor."""
    def _install(items=None, error=None, **kwargs):
        processor, extractor = make_processor(items=items, error=error, **kwargs)
        app.dependency_overrides[get_menu_processor] = lambda: processor
        return extractor
    yield _install
    app.dependency_overrides.clear()


@pytest.fixture
def api(install_processor, storage):
    app.dependency_overrides[get_storage_service] = lambda: storage
    return TestClient(app, raise_server_exceptions=False)
