"""Tests for column layout (no terminal needed)."""

import pytest

from rolo.errors import ColumnTooNarrow, InvalidColumnCount, LayoutError, WidthTooSmall
from rolo.layout import LayoutConfig, format_columns, layout_columns
from rolo.width import display_width, strip_ansi


class TestColumnOrdering:
    """Items fill down each column before the next one starts."""

    def test_column_major(self) -> None:
        output = format_columns("1\n2\n3\n4\n5\n6", 2)
        lines = output.split("\n")
        assert [line.split() for line in lines] == [["1", "4"], ["2", "5"], ["3", "6"]]

    def test_exact_output(self) -> None:
        config = LayoutConfig(width=40, gap=2, padding=1)
        output = format_columns("a\nb\nc\nd", 2, config)
        assert output == "a" + " " * 20 + "c\n" + "b" + " " * 20 + "d"

    def test_partial_last_column(self) -> None:
        config = LayoutConfig(width=40, gap=2)
        output = format_columns("1\n2\n3\n4\n5", 4, config)
        assert output == "1" + " " * 9 + "3" + " " * 9 + "5\n" + "2" + " " * 9 + "4"

    def test_three_columns(self) -> None:
        config = LayoutConfig(width=60, gap=3)
        lines = format_columns("one\ntwo\nthree\nfour\nfive\nsix", 3, config).split("\n")
        assert len(lines) == 2
        assert lines[0].split() == ["one", "three", "five"]
        assert lines[1].split() == ["two", "four", "six"]

    def test_single_column(self) -> None:
        assert format_columns("a\nb", 1) == "a\nb"

    def test_delimiter(self) -> None:
        output = format_columns("a,b,c,d", 2, LayoutConfig(width=20), delimiter=",")
        assert output == "a" + " " * 10 + "c\n" + "b" + " " * 10 + "d"


class TestColumnEdgeCases:
    def test_empty_input(self) -> None:
        assert format_columns("", 2) == ""
        assert format_columns("  \n\n", 3) == ""

    def test_single_item_unpadded(self) -> None:
        assert format_columns("single", 2) == "single"

    def test_no_trailing_whitespace(self, fruit_text: str) -> None:
        for line in format_columns(fruit_text, 3).split("\n"):
            assert line == line.rstrip()

    def test_wide_item_not_truncated(self) -> None:
        output = format_columns("averyveryverylongitem\nb", 2, LayoutConfig(width=20, gap=2))
        assert output == "averyveryverylongitem  b"

    def test_width_invariant(self, fruit_text: str) -> None:
        config = LayoutConfig(width=60, gap=2)
        for columns in range(1, 6):
            for line in format_columns(fruit_text, columns, config).split("\n"):
                assert display_width(line) <= config.width

    def test_control_separators_do_not_split_items(self) -> None:
        assert format_columns("a\x0cb\x1cc", 2, LayoutConfig(width=40)) == "a\x0cb\x1cc"

    def test_layout_columns_takes_items(self) -> None:
        assert layout_columns(["x", "y"], 2, LayoutConfig(width=10)) == "x     y"


class TestColumnErrors:
    def test_zero_columns(self) -> None:
        with pytest.raises(InvalidColumnCount) as exc_info:
            format_columns("a", 0)
        assert exc_info.value.columns == 0

    def test_zero_columns_empty_input(self) -> None:
        with pytest.raises(InvalidColumnCount):
            format_columns("", 0)

    def test_width_too_small(self) -> None:
        with pytest.raises(WidthTooSmall) as exc_info:
            format_columns("test", 3, LayoutConfig(width=10, gap=5))
        assert exc_info.value.width == 10
        assert exc_info.value.required == 10

    def test_column_too_narrow(self) -> None:
        with pytest.raises(ColumnTooNarrow) as exc_info:
            format_columns("test", 4, LayoutConfig(width=10, gap=1))
        assert exc_info.value.column_width == 1
        assert exc_info.value.minimum == 3

    def test_errors_are_layout_errors(self) -> None:
        with pytest.raises(LayoutError):
            format_columns("a", 0)

    def test_invalid_config_rejected(self) -> None:
        with pytest.raises(ValueError):
            LayoutConfig(width=0)
        with pytest.raises(ValueError):
            LayoutConfig(gap=-1)


class TestColumnWidthAware:
    """Padding is computed from display width, not string length."""

    def test_colored_items_align(self, colored_items: list[str]) -> None:
        output = format_columns("\n".join(colored_items), 2, LayoutConfig(width=40, gap=2))
        lines = [strip_ansi(line) for line in output.split("\n")]
        assert lines == ["red" + " " * 18 + "yellow", "green" + " " * 16 + "blue"]

    def test_wide_items_align(self, wide_text: str) -> None:
        output = format_columns(wide_text, 2, LayoutConfig(width=40, gap=2))
        lines = output.split("\n")
        assert len(lines) == 3
        for line, right in zip(lines, ["🌟", "emoji", "文字"]):
            assert line.endswith(right)
            assert display_width(line[:-len(right)]) == 21
