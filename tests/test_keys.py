from linesort.sorter.keys import parse_human, parse_month, parse_numeric


def test_parse_numeric_sign_and_magnitude() -> None:
    v = parse_numeric("-5", "-5")
    assert (v.sign, v.magnitude) == (-1, 5.0)

    v = parse_numeric("+7", "+7")
    assert (v.sign, v.magnitude) == (1, 7.0)

    v = parse_numeric("0", "0")
    assert (v.sign, v.magnitude) == (0, 0.0)


def test_parse_numeric_negative_zero_keeps_negative_sign() -> None:
    v = parse_numeric("-0", "-0")
    assert (v.sign, v.magnitude) == (-1, 0.0)


def test_parse_numeric_stops_at_first_foreign_character() -> None:
    assert parse_numeric("1.5e3xyz", "1.5e3xyz").magnitude == 1500.0
    assert parse_numeric("1.2.3", "1.2.3").magnitude == 1.2
    assert parse_numeric("12abc", "12abc").magnitude == 12.0
    assert parse_numeric("2e-2", "2e-2").magnitude == 0.02
    assert parse_numeric(".5", ".5").magnitude == 0.5


def test_parse_numeric_garbage_degrades_to_zero() -> None:
    for text in ["", "abc", "-", ".", "e5", "1e", "1e+", "1e999"]:
        v = parse_numeric(text, text)
        assert v.magnitude == 0.0, text
        assert v.sign in (0, -1), text
    assert parse_numeric("abc", "abc").sign == 0
    assert parse_numeric("1e999", "1e999").sign == 0


def test_parse_numeric_keeps_original_text() -> None:
    v = parse_numeric("42", "  42")
    assert v.original_text == "  42"


def test_parse_human_suffixes() -> None:
    assert parse_human("2k", "2k").suffix_order == 1
    assert parse_human("2K", "2K").suffix_order == 1
    assert parse_human("1M", "1M").suffix_order == 2
    assert parse_human("3G", "3G").suffix_order == 3
    assert parse_human("1.5Ti", "1.5Ti").suffix_order == 4
    assert parse_human("9Y", "9Y").suffix_order == 8
    assert parse_human("500", "500").suffix_order == 0
    assert parse_human("5x", "5x").suffix_order == 0


def test_parse_human_without_digits_has_no_suffix() -> None:
    v = parse_human("k", "k")
    assert (v.sign, v.suffix_order, v.magnitude) == (0, 0, 0.0)
    assert parse_human("-M", "-M").suffix_order == 0


def test_parse_human_e_after_digits_is_an_exponent() -> None:
    v = parse_human("1E", "1E")
    assert (v.sign, v.suffix_order, v.magnitude) == (0, 0, 0.0)


def test_parse_month() -> None:
    assert parse_month("Jan 1", "Jan 1").month_index == 1
    assert parse_month("feb", "feb").month_index == 2
    assert parse_month("December", "December").month_index == 12
    assert parse_month("Xyz 1", "Xyz 1").month_index == 0
    assert parse_month("Ja", "Ja").month_index == 0
    assert parse_month("", "").month_index == 0
    assert parse_month("\u017fep", "\u017fep").month_index == 0
    assert parse_month("\u00e9t\u00e9", "\u00e9t\u00e9").month_index == 0
