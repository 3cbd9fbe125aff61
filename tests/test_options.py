import pytest

from linesort.sorter.options import ConfigurationError, Mode, SortOptions


def test_from_mapping_defaults() -> None:
    options = SortOptions.from_mapping({})
    assert options == SortOptions()
    assert options.mode is Mode.LEXICOGRAPHIC
    assert options.column == 0


def test_from_mapping_selects_mode_and_flags() -> None:
    options = SortOptions.from_mapping({"human": True, "column": 2, "reverse": True, "unique": True})
    assert options.mode is Mode.HUMAN
    assert options.column == 2
    assert options.reverse and options.unique
    assert not options.check


@pytest.mark.parametrize(
    "flags",
    [
        {"numeric": True, "human": True},
        {"numeric": True, "month": True},
        {"human": True, "month": True},
        {"numeric": True, "human": True, "month": True},
    ],
)
def test_conflicting_modes_are_rejected(flags) -> None:
    with pytest.raises(ConfigurationError, match="cannot combine"):
        SortOptions.from_mapping(flags)


@pytest.mark.parametrize("column", [-1, "2", 1.5, True])
def test_bad_column_is_rejected(column) -> None:
    with pytest.raises(ConfigurationError):
        SortOptions.from_mapping({"column": column})


def test_unknown_key_is_rejected() -> None:
    with pytest.raises(ConfigurationError, match="colour"):
        SortOptions.from_mapping({"colour": True})


def test_describe() -> None:
    assert SortOptions().describe() == "lexicographic, whole line"
    text = SortOptions(column=3, mode=Mode.MONTH, reverse=True).describe()
    assert text == "month, column=3, reverse"


@pytest.mark.parametrize("key", ["numeric", "human", "month", "reverse", "unique", "ignore_trailing_blanks", "check"])
def test_non_bool_flags_are_rejected(key) -> None:
    with pytest.raises(ConfigurationError, match=f"{key} must be true or false"):
        SortOptions.from_mapping({key: "false"})


def test_null_flags_mean_false() -> None:
    assert SortOptions.from_mapping({"numeric": None, "reverse": None}) == SortOptions()
