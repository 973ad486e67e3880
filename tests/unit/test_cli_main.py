from __future__ import annotations
from pathlib import Path
from delim_import.cli import main as cli_main
from delim_import.logging.init import reset_logging


def test_cli_success(data_files: list[Path], capsys):
    reset_logging()
    code = cli_main([str(p) for p in data_files])
    out = capsys.readouterr().out
    assert code == 0
    assert "INFO file=two_states.csv records=2" in out
    assert "SUMMARY files=2/2 success=2 failed=0 rows=5" in out


def test_cli_no_files(temp_workdir: Path, capsys):
    reset_logging()
    code = cli_main([])
    out = capsys.readouterr().out
    assert code == 1
    assert "ERROR no input files given" in out


def test_cli_partial_failure(data_files: list[Path], temp_workdir: Path, capsys):
    reset_logging()
    code = cli_main([str(data_files[0]), str(temp_workdir / "data" / "nope.csv")])
    out = capsys.readouterr().out
    assert code == 2
    assert "ERROR file=nope.csv FILE_READ_ERROR" in out
    assert "SUMMARY files=2/2 success=1 failed=1" in out
    logs = list((temp_workdir / "logs").glob("errors-*.log"))
    assert len(logs) == 1


def test_cli_invalid_encoding_is_fatal(data_files: list[Path], capsys):
    reset_logging()
    code = cli_main([str(data_files[0]), "--encoding", "latin1"])
    out = capsys.readouterr().out
    assert code == 1
    assert "ERROR config: unsupported encoding" in out


def test_cli_invalid_field_type_is_fatal(data_files: list[Path], capsys):
    reset_logging()
    code = cli_main([str(data_files[0]), "--field-types", "fips:date"])
    assert code == 1
    assert "ERROR config:" in capsys.readouterr().out


def test_cli_field_types_and_output(data_files: list[Path], temp_workdir: Path, capsys):
    reset_logging()
    src = temp_workdir / "data" / "fips.txt"
    src.write_text("fips\n00001\n", encoding="utf-8")
    out_file = temp_workdir / "output.csv"
    code = cli_main([str(src), "--field-types", "fips:str", "-o", str(out_file)])
    assert code == 0
    assert out_file.read_text(encoding="utf-8") == "fips\n00001\n"


def test_cli_config_file_options(write_config: Path, data_files: list[Path], temp_workdir: Path, capsys):
    reset_logging()
    out_file = temp_workdir / "counties_out.tsv"
    code = cli_main([str(data_files[1]), "--delimiter", "\\t", "-o", str(out_file)])
    assert code == 0
    # config の fips:str により文字列のまま出力される
    assert out_file.read_text(encoding="utf-8").splitlines()[1] == "Baker\t41001"


def test_cli_inspect_data(data_files: list[Path], capsys):
    reset_logging()
    code = cli_main([str(data_files[1]), "--inspect-data"])
    out = capsys.readouterr().out
    assert code == 0
    assert "FILE: counties.tsv" in out
    assert "delimiter='\\t'" in out
    assert "'fips': 'number'" in out
    assert '"county": "Baker"' in out


def test_cli_debug_mode(data_files: list[Path], capsys):
    reset_logging()
    code = cli_main([str(data_files[0]), "--debug"])
    out = capsys.readouterr().out
    assert code == 0
    assert "DEBUG debug mode enabled" in out
    assert "DEBUG field 'name' inferred as string" in out
