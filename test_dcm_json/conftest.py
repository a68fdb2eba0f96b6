""" Configure the tests """

from pathlib import Path
from shutil import rmtree

import pytest

from dcm_json import (
    SerializationConfig,
    JSONSerializer,
    load_backend,
    reset_json_serializer,
)


TESTING_DIR = Path(__file__).parent / "tmp"


def pytest_sessionstart():
    """
    Create the temporary directory to store the test results
    before running the tests.
    """
    if TESTING_DIR.is_dir():
        rmtree(TESTING_DIR)
    TESTING_DIR.mkdir(exist_ok=True)


def pytest_sessionfinish():
    """
    Remove the temporary directory after whole test run finished.
    """
    if TESTING_DIR.is_dir():
        rmtree(TESTING_DIR)


@pytest.fixture()
def temporary_directory():
    """
    Return the path for the temporary directory.
    """
    return TESTING_DIR


@pytest.fixture(name="fixtures")
def _fixtures():
    """
    Return the path for the fixtures directory.
    """
    return Path(__file__).parent / "fixtures"


@pytest.fixture(autouse=True)
def _reset_shared_serializer():
    """
    Drop the shared serializer before and after every test.
    """
    reset_json_serializer()
    yield
    reset_json_serializer()


@pytest.fixture(name="backend_name", params=["orjson", "simplejson"])
def _backend_name(request):
    return request.param


@pytest.fixture(name="backend")
def _backend(backend_name):
    return load_backend(backend_name)


@pytest.fixture(name="serializer")
def _serializer(backend):
    return JSONSerializer(backend)


@pytest.fixture(name="configure")
def _configure(monkeypatch):
    """
    Returns a function that patches `SerializationConfig` and drops the
    shared serializer.
    """
    def _(**kwargs):
        for key, value in kwargs.items():
            monkeypatch.setattr(SerializationConfig, key, value)
        reset_json_serializer()
    return _
