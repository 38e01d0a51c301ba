import pytest

from parking_windows.grammar import join_phrases, ordinal


@pytest.mark.parametrize(
    "n, expected",
    [(1, "1st"), (2, "2nd"), (3, "3rd"), (4, "4th"), (11, "11th"), (12, "12th"), (13, "13th"), (21, "21st"), (112, "112th")],
)
def test_ordinal(n, expected):
    assert ordinal(n) == expected


def test_join_phrases():
    assert join_phrases([]) == ""
    assert join_phrases(["A"]) == "A"
    assert join_phrases(["A", "B"]) == "A and B"
    assert join_phrases(["A", "B", "C"]) == "A, B and C"


def test_join_phrases_leaves_input_untouched():
    items = ("A", "B", "C")
    join_phrases(items)
    assert items == ("A", "B", "C")
