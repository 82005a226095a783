import logging

from slashbot.logs import resolve_level


def test_resolve_level_accepts_names_in_any_case() -> None:
    assert resolve_level("debug") == logging.DEBUG
    assert resolve_level("WARNING") == logging.WARNING


def test_resolve_level_unknown_name_falls_back_to_info() -> None:
    assert resolve_level("bogus") == logging.INFO


def test_resolve_level_accepts_numbers_and_digit_strings() -> None:
    assert resolve_level(logging.ERROR) == logging.ERROR
    assert resolve_level("10") == logging.DEBUG
    assert resolve_level(" 30 ") == logging.WARNING
