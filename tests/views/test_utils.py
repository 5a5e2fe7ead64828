from telegram import PhotoSize

from src.utils import describe_photos, in_rows, or_default


def test_in_rows_pairs_items():
    assert in_rows(["a", "b", "c"]) == [["a", "b"], ["c"]]
    assert in_rows([]) == []
    assert in_rows(range(6), size=3) == [[0, 1, 2], [3, 4, 5]]


def test_describe_photos_separates_sizes():
    text = describe_photos([PhotoSize("a", "ua", 1, 2), PhotoSize("b", "ub", 3, 4, file_size=9)])
    assert text == (
        "Image of size (1 x 2)\nID: a\nSize: 0"
        "\n----------\n"
        "Image of size (3 x 4)\nID: b\nSize: 9"
    )


def test_or_default():
    assert or_default(None, "none") == "none"
    assert or_default("", "none") == "none"
    assert or_default(0, "none") == "0"
