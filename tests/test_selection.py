"""
Tests for selection results and the concrete selection services.
"""

import pytest

from ohgrid.selection import (
    CANCELLED,
    SELECTED,
    WRONG_COUNT,
    PromptSelection,
    SelectionResult,
    StaticSelection,
)


def test_static_selection_of_four():
    result = StaticSelection([4, 3, 2, 1]).select_curves()
    assert result.ok
    assert result.status == SELECTED
    assert result.curves == (4, 3, 2, 1)


def test_static_selection_wrong_count():
    result = StaticSelection([1, 2, 3]).select_curves()
    assert result.status == WRONG_COUNT
    assert not result.ok


def test_duplicates_collapse_before_counting():
    assert SelectionResult.from_picked([1, 2, 2, 3]).status == WRONG_COUNT


def test_static_selection_cancelled():
    assert StaticSelection(None).select_curves().status == CANCELLED


def _reader(answer):
    def read(_prompt):
        if isinstance(answer, BaseException):
            raise answer
        return answer
    return read


@pytest.mark.parametrize("answer, status, curves", [
    ("1 2 3 4", SELECTED, (1, 2, 3, 4)),
    ("1, 2,3 ,4", SELECTED, (1, 2, 3, 4)),
    ("1 2 x 3 4", WRONG_COUNT, (1, 2, 3, 4)),
    ("1 2 3 4 5a", WRONG_COUNT, (1, 2, 3, 4)),
    ("7 8 9", WRONG_COUNT, (7, 8, 9)),
    ("", CANCELLED, ()),
    ("   ", CANCELLED, ()),
])
def test_prompt_selection(answer, status, curves):
    result = PromptSelection(_reader(answer)).select_curves()
    assert result.status == status
    assert result.curves == curves


def test_prompt_selection_eof_cancels():
    assert PromptSelection(_reader(EOFError())).select_curves().status == CANCELLED


def test_prompt_text_is_passed_through():
    seen = []

    def read(prompt):
        seen.append(prompt)
        return ""

    PromptSelection(read).select_curves("Pick the loop")
    assert seen and seen[0].startswith("Pick the loop")
