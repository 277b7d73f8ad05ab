"""Normalise numbers written with different decimal and grouping separators."""

from __future__ import annotations

import logging
from collections.abc import Iterable

_log = logging.getLogger(__name__)

POINT = "."
COMMA = ","
MINUS = "-"
NA = "NA"
_DIGITS = frozenset("0123456789")


def is_valid_char(ch: str) -> bool:
    """Whether ch is a digit, a point, a comma or a minus sign."""
    return ch in _DIGITS or ch in (POINT, COMMA, MINUS)


def remove_char(text: str, ch: str) -> str:
    """text with every occurrence of ch removed."""
    return text.replace(ch, "")


def has_multiple_commas_and_points(text: str) -> bool:
    """Whether text holds more than one comma and more than one point."""
    return text.count(COMMA) > 1 and text.count(POINT) > 1


def has_separator_at_the_end(text: str) -> bool:
    """Whether the last character of a non-empty text is a separator."""
    if not text:
        raise ValueError("empty string")
    return text[-1] in (COMMA, POINT)


def has_invalid_comma_point_sequence(text: str) -> bool:
    """Whether the single separator of one kind is not the rightmost one."""
    if has_multiple_commas_and_points(text):
        raise ValueError(f"multiple commas and points in {text!r}")
    comma_count = text.count(COMMA)
    point_count = text.count(POINT)
    if comma_count == 0 or point_count == 0:
        return False
    if comma_count > 1 and text.find(POINT) < text.rfind(COMMA):
        return True
    if point_count > 1 and text.find(COMMA) < text.rfind(POINT):
        return True
    return False


def is_str_na(text: str) -> bool:
    """Whether text marks a missing value."""
    return text == NA


def is_str_valid_characters(text: str) -> bool:
    """Whether text is "NA" or only digits, separators and a leading minus."""
    if not text:
        return False
    if text == NA:
        return True
    if not all(is_valid_char(c) for c in text):
        return False
    minus_count = text.count(MINUS)
    if minus_count > 1:
        return False
    if minus_count == 1 and text[0] != MINUS:
        return False
    return True


def is_str_correct_format(text: str) -> bool:
    """Whether the separators in text follow a known convention."""
    if not is_str_valid_characters(text) or is_str_na(text):
        raise ValueError(f"not a number with valid characters: {text!r}")
    if has_multiple_commas_and_points(text):
        return False
    if has_invalid_comma_point_sequence(text):
        return False
    if has_separator_at_the_end(text):
        return False
    return True


def _is_comma_decimal_separator(text: str) -> bool:
    comma_count = text.count(COMMA)
    point_count = text.count(POINT)
    if comma_count == 1:
        comma_pos = text.find(COMMA)
        if point_count > 0 and text.rfind(POINT) < comma_pos:
            return True
        if point_count == 0 and len(text) - comma_pos - 1 != 3:
            return True
    return comma_count == 0 and point_count > 1


def _is_point_decimal_separator(text: str) -> bool:
    comma_count = text.count(COMMA)
    point_count = text.count(POINT)
    if point_count == 1:
        point_pos = text.find(POINT)
        if comma_count > 0 and text.rfind(COMMA) < point_pos:
            return True
        if comma_count == 0 and len(text) - point_pos - 1 != 3:
            return True
    return point_count == 0 and comma_count > 1


def is_comma_as_separator(strs: Iterable[str]) -> bool:
    """Whether the values, taken together, use a comma as decimal separator.

    Returns False when no value proves it or when other values contradict it.
    """
    strs = list(strs)
    comma_examples = [s for s in strs if _is_comma_decimal_separator(s)]
    point_examples = [s for s in strs if _is_point_decimal_separator(s)]
    if not comma_examples:
        return False
    if point_examples:
        _log.warning(
            "Cannot determine separator with certainty. "
            "Comma as separator: %s; point as separator: %s",
            comma_examples[0],
            point_examples[0],
        )
        return False
    return True


def parse_str(text: str, is_point_as_separator: bool) -> str:
    """Rewrite text so that a point is the only decimal separator.

    "NA" becomes "-1.0", the marker of a missing value.
    """
    if is_str_na(text):
        return "-1.0"
    if not is_str_correct_format(text):
        raise ValueError(f"number in unknown format: {text!r}")
    if is_point_as_separator:
        processed = remove_char(text, COMMA)
        if processed.count(POINT) > 1:
            head, _, tail = processed.rpartition(POINT)
            processed = remove_char(head, POINT) + POINT + tail
        return processed
    processed = remove_char(text, POINT)
    head, sep, tail = processed.rpartition(COMMA)
    if sep:
        processed = head + POINT + tail
    return remove_char(processed, COMMA)