# Shared pytest fixtures
from __future__ import annotations
import codecs
import tempfile
from pathlib import Path
import pytest

from delim_import.logging.init import reset_logging


@pytest.fixture()
def temp_workdir(monkeypatch) -> Path:
    with tempfile.TemporaryDirectory() as d:
        p = Path(d)
        (p / "config").mkdir()
        (p / "data").mkdir()
        (p / "logs").mkdir()
        monkeypatch.chdir(p)
        yield p


@pytest.fixture()
def clean_logging():
    reset_logging()
    yield
    reset_logging()


@pytest.fixture()
def sample_config_yaml() -> str:
    return """delimiter: ","
encoding: utf8
field_types:
  - fips:str
  - count:num
"""


@pytest.fixture()
def write_config(temp_workdir: Path, sample_config_yaml: str) -> Path:
    cfg = temp_workdir / "config" / "import.yml"
    cfg.write_text(sample_config_yaml, encoding="utf-8")
    return cfg


@pytest.fixture()
def data_files(temp_workdir: Path) -> list[Path]:
    """Two small delimited files: one comma separated, one tab separated."""
    states = temp_workdir / "data" / "two_states.csv"
    states.write_text("name,fips,pop\nOregon,41,\"4,237,256\"\nWashington,53,\"7,705,281\"\n", encoding="utf-8")
    counties = temp_workdir / "data" / "counties.tsv"
    counties.write_text("county\tfips\nBaker\t41001\nBenton\t41003\nClackamas\t41005\n", encoding="utf-8")
    return [states, counties]


@pytest.fixture()
def encode_with_bom():
    """Encode text prefixed with the byte-order mark of the given encoding."""
    def _encode(text: str, encoding: str) -> bytes:
        boms = {
            "utf-8": codecs.BOM_UTF8,
            "utf-16-le": codecs.BOM_UTF16_LE,
            "utf-16-be": codecs.BOM_UTF16_BE,
        }
        return boms[encoding] + text.encode(encoding)
    return _encode
