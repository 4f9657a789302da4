import pandas as pd
import pytest

from street_fines.utils.data_extraction.form_helpers.data_formatting import (
    format_column_name,
    totals_to_frame,
)
from street_fines.utils.data_extraction.form_helpers.file_io import (
    get_file_path,
    save_to_csv,
)


@pytest.mark.parametrize(
    "name, expected",
    [
        ("set_fine_amount", "set_fine_amount"),
        ("Set Fine Amount", "set_fine_amount"),
        ("location2", "location2"),
        (" Location2 ", "location2"),
        ("Tag #", "tag_"),
    ],
)
def test_format_column_name(name, expected):
    assert format_column_name(name) == expected


def test_format_column_name_rejects_empty():
    with pytest.raises(ValueError):
        format_column_name("")


def test_totals_to_frame_keeps_order():
    totals = pd.Series({"KING": 90, "BAY": 10}, name="total_fines")
    frame = totals_to_frame(totals)

    assert list(frame.columns) == ["street", "total_fines"]
    assert frame.to_dict(orient="records") == [
        {"street": "KING", "total_fines": 90},
        {"street": "BAY", "total_fines": 10},
    ]


def test_totals_to_frame_rejects_frames():
    with pytest.raises(ValueError):
        totals_to_frame(pd.DataFrame({"a": [1]}))


def test_save_to_csv_replaces_previous_run(tmp_path):
    path = tmp_path / "processed" / "totals.csv"
    first = pd.DataFrame({"street": ["KING"], "total_fines": [90]})
    second = pd.DataFrame({"street": ["BAY"], "total_fines": [10]})

    assert save_to_csv(first, path)
    assert save_to_csv(second, path)

    assert path.read_text().splitlines() == ["street,total_fines", "BAY,10"]


def test_save_to_csv_rejects_non_dataframe(tmp_path):
    with pytest.raises(ValueError):
        save_to_csv([1, 2], tmp_path / "x.csv")


def test_get_file_path():
    assert get_file_path(".", "data/processed/", "out.csv").as_posix() == "data/processed/out.csv"
