from mediameta.common.strings.splitters import csv_to_list, split_components


def test_csv_to_list_none():
    assert csv_to_list(None) == []


def test_csv_to_list_list_input():
    assert csv_to_list([" a ", "b", "", "  "]) == ["a", "b"]


def test_csv_to_list_string_input():
    assert csv_to_list(" GET, POST ,, OPTIONS ") == ["GET", "POST", "OPTIONS"]


def test_split_components_limits_parts():
    assert split_components("5.000000", ".", max_parts=2) == ["5", "000000"]
    assert split_components("5", ".", max_parts=2) == ["5"]
    assert split_components("5.", ".", max_parts=2) == ["5", ""]
    assert split_components("0.56.22", ".", max_parts=2) is None
