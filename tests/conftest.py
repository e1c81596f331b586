import pytest

from bigtext.config import logger

SAMPLE_A = ["*  *", "* **", "****", "*   ", "*   "]


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    for name in ("BIGTEXT_CONFIG", "BIGTEXT_CHARSET", "BIGTEXT_GLYPH_FILE",
                 "BIGTEXT_SHOW_HEADER", "BIGTEXT_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    level = logger.level
    yield
    logger.set_level(level)


@pytest.fixture
def sample_table():
    return {"A": list(SAMPLE_A)}


@pytest.fixture
def blank_table():
    return {
        "A": ["     "] * 5,
        "1": ["     "] * 5,
        '"': ["     "] * 5,
    }


@pytest.fixture
def glyph_file(tmp_path):
    path = tmp_path / "glyphs.json"
    path.write_text(
        '{"H": ["H   H", "H   H", "HHHHH", "H   H", "H   H"],'
        ' "i": ["IIIII", "  I  ", "  I  ", "  I  ", "IIIII"]}',
        encoding="utf-8",
    )
    return path

