import pytest

from unixkit.sort import (
    SortOptions,
    delete_duplicates,
    extract_numeric_strings,
    main,
    parse_args,
    read_lines,
    remove_last_empty_line,
    sort_lines,
)

FRUITS = ["banana", "apple", "cherry", "apple", ""]
COLUMNS = ["x c", "y a", "z", "w b", "v a", ""]


def test_without_keys():
    assert sort_lines(FRUITS, SortOptions()) == ["apple", "apple", "banana", "cherry"]


def test_default_options_argument():
    assert sort_lines(["b", "a"]) == ["a", "b"]


def test_key_u():
    assert sort_lines(FRUITS, SortOptions(unique=True)) == ["apple", "banana", "cherry"]


def test_key_r():
    assert sort_lines(FRUITS, SortOptions(reverse=True)) == [
        "cherry",
        "banana",
        "apple",
        "apple",
    ]


def test_key_n():
    lines = ["10", "b", "2", "a", "1.5", "-3", ""]
    assert sort_lines(lines, SortOptions(numeric=True)) == [
        "a",
        "b",
        "-3",
        "1.5",
        "2",
        "10",
    ]


def test_key_n_reformats_numbers():
    lines = ["1e3", "2.50", "007", "-0"]
    assert sort_lines(lines, SortOptions(numeric=True)) == ["-0", "2.5", "7", "1000"]


def test_key_n_special_values():
    lines = ["inf", "NaN", "1", "-Infinity"]
    assert sort_lines(lines, SortOptions(numeric=True)) == ["NaN", "-Inf", "1", "+Inf"]


def test_correct_column_key_k():
    assert sort_lines(["b 2", "a 3", "c 1"], SortOptions(column=1)) == [
        "a 3",
        "b 2",
        "c 1",
    ]


def test_second_column_key_k():
    assert sort_lines(COLUMNS, SortOptions(column=2)) == [
        "z",
        "v a",
        "y a",
        "w b",
        "x c",
    ]


def test_invalid_column_key_k_falls_back_to_lines():
    assert sort_lines(COLUMNS, SortOptions(column=15)) == [
        "v a",
        "w b",
        "x c",
        "y a",
        "z",
    ]


def test_negative_column_leaves_order():
    assert sort_lines(["b", "a", ""], SortOptions(column=-1)) == ["b", "a"]


def test_unique_then_reverse():
    options = SortOptions(unique=True, reverse=True)
    assert sort_lines(FRUITS, options) == ["cherry", "banana", "apple"]


def test_input_not_modified():
    lines = list(FRUITS)
    sort_lines(lines, SortOptions(reverse=True))
    assert lines == FRUITS


def test_remove_last_empty_line():
    assert remove_last_empty_line(["a", ""]) == ["a"]
    assert remove_last_empty_line(["a", "b"]) == ["a", "b"]
    assert remove_last_empty_line([]) == []


def test_extract_numeric_strings():
    texts, numbers = extract_numeric_strings(["1", "x", "2.5", "1_000", " 3", "1e400"])
    assert texts == ["x", "1_000", " 3", "1e400"]
    assert numbers == [1.0, 2.5]


def test_extract_hex_float():
    texts, numbers = extract_numeric_strings(["0x1p-2"])
    assert texts == []
    assert numbers == [0.25]


def test_delete_duplicates():
    assert delete_duplicates(["a", "a", "b", "c", "c", "c"]) == ["a", "b", "c"]


def test_read_lines(tmp_path):
    path = tmp_path / "input.txt"
    path.write_text("a\nb\n", encoding="utf-8")
    assert read_lines(str(path)) == ["a", "b", ""]


def test_parse_args():
    options, path = parse_args(["-k", "2", "-n", "-r", "-u", "data.txt"])
    assert options == SortOptions(column=2, numeric=True, reverse=True, unique=True)
    assert path == "data.txt"


def test_main_prints_sorted(tmp_path, capsys):
    path = tmp_path / "input.txt"
    path.write_text("b\na\nc\n", encoding="utf-8")
    assert main(["-r", str(path)]) == 0
    assert capsys.readouterr().out == "c\nb\na\n"


def test_main_missing_file(tmp_path, capsys):
    assert main([str(tmp_path / "missing.txt")]) == 1
    assert capsys.readouterr().err != ""


def test_main_bad_column_argument():
    with pytest.raises(SystemExit) as info:
        main(["-k", "x", "file.txt"])
    assert info.value.code == 2