import pytest
from pathgraph.config import get_settings

CAMPUS_DOT = """digraph campus {
    "Union South" -> "Computer Sciences and Statistics" [seconds=1.0];
    "Computer Sciences and Statistics" -> "Union South" [seconds=1.0];
    "Computer Sciences and Statistics" -> "Weeks Hall for Geological Sciences" [seconds=2.5];
    "Union South" -> "Weeks Hall for Geological Sciences" [seconds=10.0];
    "Memorial Union";
}
"""


@pytest.fixture
def campus_file(tmp_path):
    path = tmp_path / "campus.dot"
    path.write_text(CAMPUS_DOT, encoding="utf-8")
    return path


@pytest.fixture(autouse=True)
def fresh_settings():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
