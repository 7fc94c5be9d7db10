import pytest

from nestset import MultiSet


@pytest.fixture
def abc():
    return MultiSet("{a, b, c}")


@pytest.fixture
def bcd():
    return MultiSet("{b, c, d}")


@pytest.fixture
def script_file(tmp_path):
    def _write(text):
        path = tmp_path / "script.ms"
        path.write_text(text)
        return str(path)
    return _write
