import pytest


@pytest.fixture
def write_al(tmp_path):
    """Write a file under tmp_path and return its Path."""
    def _write(name, content, encoding="utf-8"):
        path = tmp_path / name
        path.write_text(content, encoding=encoding)
        return path
    return _write
