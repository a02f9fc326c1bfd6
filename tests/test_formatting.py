import pytest

from tran_receiver.utils.formatting import format_size
from tran_receiver.utils.path import top_level_files, top_level_files_text


@pytest.mark.parametrize(
    "size, expected",
    [
        (0, "0 B"),
        (999, "999 B"),
        (1000, "1.0 kB"),
        (2048, "2.0 kB"),
        (1_500_000, "1.5 MB"),
        (3_200_000_000, "3.2 GB"),
        (-5, "0 B"),
    ],
)
def test_format_size(size, expected):
    assert format_size(size) == expected


def test_top_level_files_keeps_first_seen_order():
    files = ["b.txt", "dir/x.txt", "a.txt", "dir/y/z.txt"]
    assert top_level_files(files) == [("b.txt", 0), ("dir", 2), ("a.txt", 0)]


def test_top_level_files_text_annotates_directories():
    assert top_level_files_text(["a.txt", "dir/b.txt"]) == "a.txt, dir (1 file)"
    assert top_level_files_text(["d/1", "d/2", "e"]) == "d (2 files), e"


def test_top_level_files_normalizes_separators_and_prefixes():
    files = ["./docs/readme.md", "/abs/file", "win\\path\\f.txt", "", "."]
    assert top_level_files(files) == [("docs", 1), ("abs", 1), ("win", 1)]


def test_top_level_files_text_empty():
    assert top_level_files_text([]) == ""
