import os

import pytest

SAMPLE_CATALOG = os.path.join(os.path.dirname(__file__), "data", "videos.txt")


def pytest_addoption(parser):
    parser.addoption(
        "--catalog-file",
        action="store",
        default=SAMPLE_CATALOG,
        help="catalog file used by tests that load a real catalog",
    )


@pytest.fixture
def catalog_file(request):
    """Path of the catalog file for file-based tests."""
    path = request.config.getoption("--catalog-file")
    if not os.path.exists(path):
        pytest.skip(f"catalog file {path} not found")
    return path
