import pytest

from genre_library.book import Book
from genre_library.collection import LibraryCollection
from genre_library.main import LibraryManager
from genre_library.seed import sample_collection
from genre_library.ui_helpers import OUTPUT_MODE_ENV

@pytest.fixture(autouse=True)
def plain_output(monkeypatch):
    # --output sets the mode through the environment; restore it after each test
    monkeypatch.setenv(OUTPUT_MODE_ENV, "plain")
    yield
    LibraryManager._instance = None

@pytest.fixture
def collection():
    # Fresh sample catalog for every test
    return sample_collection()

@pytest.fixture
def empty_collection():
    return LibraryCollection()

@pytest.fixture
def hobbit():
    return Book("The Hobbit", "J.R.R. Tolkien", "Fantasy")
