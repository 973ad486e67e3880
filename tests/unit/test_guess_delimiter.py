from __future__ import annotations

from delim_import.delim.delimiter import count_delimiter, guess_delimiter


def test_guesses_csv():
    assert guess_delimiter("a,b\n1,2") == ","


def test_guesses_tsv():
    assert guess_delimiter("a\tb\n1,2") == "\t"


def test_guesses_pipe():
    assert guess_delimiter("a|b\n1,2") == "|"


def test_guesses_semicolon():
    assert guess_delimiter("a;b\n1;2") == ";"


def test_defaults_to_comma():
    assert guess_delimiter("") == ","
    assert guess_delimiter("name\nfoo\nbar") == ","


def test_single_line_uses_presence():
    assert guess_delimiter("a|b|c") == "|"


def test_consistent_candidate_beats_inconsistent_one():
    # comma appears in the header but the column count is not stable
    text = "a,b;c;d\n1;2;3\n4;5;6\n7;8;9"
    assert guess_delimiter(text) == ";"


def test_tab_only_lines_count_as_rows():
    # tab-only rows match the header's tab count
    text = "a\tb,c\n\t\n\t\n1\t2,3"
    assert guess_delimiter(text) == "\t"


def test_empty_lines_are_skipped():
    assert guess_delimiter("\n\na|b\n\n1|2\n") == "|"


def test_european_decimals_with_semicolon():
    text = "name;value\nfoo;1,5\nbar;2,25\n"
    assert guess_delimiter(text) == ";"


def test_delimiters_inside_quotes_are_not_counted():
    text = 'name\tnote\n"Smith, John"\tok\n"Doe, Jane"\tfine\n'
    assert count_delimiter('"Smith, John"\tok', ",") == 0
    assert guess_delimiter(text) == "\t"


def test_tie_prefers_comma():
    assert guess_delimiter("a,b;c\n1,2;3") == ","


def test_mixed_line_endings():
    assert guess_delimiter("a|b\r\n1|2\r3|4") == "|"


def test_deterministic():
    text = "x;y;z\n1;2;3\n"
    assert {guess_delimiter(text) for _ in range(5)} == {";"}
