from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path

from delim_import.config.errors import ConfigError
from delim_import.config.loader import load_options
from delim_import.logging.error_log import ErrorLogBuffer
from delim_import.logging.init import log_summary, set_debug, setup_logging
from delim_import.models.config_models import ImportOptions
from delim_import.services.orchestrator import ProcessingError, import_file, process_all
from delim_import.services.summary import render_summary_line

"""CLI entrypoint.

- Load options (config file, then command line overrides)
- Import each input file, optionally exporting it
- Print the SUMMARY line and exit with the run status
"""

EXIT_SUCCESS_ALL = 0
EXIT_PARTIAL_FAILURE = 2
EXIT_FATAL = 1

INSPECT_ROWS = 3


def _parse_args(argv: list[str]) -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Delimited text (CSV/TSV/pipe/semicolon) importer")
    p.add_argument("files", nargs="*", type=Path, help="Input files")
    p.add_argument("--config", type=Path, default=None, help="YAML options file (default: config/import.yml if present)")
    p.add_argument("--delimiter", default=None, help="Field delimiter (default: guessed)")
    p.add_argument("--encoding", default=None, help="utf8 | utf16 | utf16le | utf16be (default: BOM / utf8)")
    p.add_argument("--field-types", default=None, help="Comma separated type hints, e.g. fips:str,count:num")
    p.add_argument("-o", "--output", type=Path, default=None, help="Export file (one input) or directory")
    p.add_argument("--export-delimiter", default=None, help="Delimiter for exported files (default: from extension)")
    p.add_argument("--debug", action="store_true", help="Enable debug logging")
    p.add_argument("--inspect-data", action="store_true", help="Print fields, types & first rows then exit")
    return p.parse_args(argv)


def _unescape_delimiter(value: str | None) -> str | None:
    # シェルから "\t" を渡しやすくする
    if value is None:
        return None
    return {"\\t": "\t", "tab": "\t", "pipe": "|", "comma": ",", "semicolon": ";"}.get(value, value)


def _inspect_data(files: list[Path], options: ImportOptions) -> int:
    for f in files:
        print(f"FILE: {f.name}")
        try:
            rs = import_file(f, options)
        except (OSError, ConfigError) as e:
            print(f"  read_error: {e}")
            continue
        print(f"  delimiter={rs.delimiter!r} encoding={rs.encoding} fields={rs.field_names}")
        print(f"  types={rs.field_types}")
        print("  sample_rows=", json.dumps(rs.records[:INSPECT_ROWS], ensure_ascii=False))
    return EXIT_SUCCESS_ALL


def main(argv: list[str] | None = None) -> int:
    logger = setup_logging()

    # [] が渡された場合に sys.argv (pytest の引数など) を読まないよう None のときのみ参照
    if argv is None:
        argv = sys.argv[1:]
    args = _parse_args(argv)

    if args.debug:
        set_debug(logger)
        logger.debug("debug mode enabled")

    try:
        options = load_options(args.config).merged(
            delimiter=_unescape_delimiter(args.delimiter),
            encoding=args.encoding,
            field_types=args.field_types,
            export_delimiter=_unescape_delimiter(args.export_delimiter),
        )
    except ConfigError as e:
        logger.error(f"config: {e}")
        return EXIT_FATAL

    if not args.files:
        logger.error("no input files given")
        return EXIT_FATAL

    if args.inspect_data:
        return _inspect_data(args.files, options)

    error_log = ErrorLogBuffer()
    try:
        result = process_all(args.files, options, output=args.output, error_log=error_log)
    except ProcessingError as e:
        logger.error(f"processing: {e}")
        return EXIT_FATAL

    log_path = error_log.flush()
    if log_path is not None:
        logger.info(f"error log written to {log_path}")

    summary_line = render_summary_line(result.total_files, result)
    # log_summary が "SUMMARY " を付与するので除去
    log_summary(summary_line[len("SUMMARY "):])

    if result.failed_files > 0:
        return EXIT_PARTIAL_FAILURE
    return EXIT_SUCCESS_ALL


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
