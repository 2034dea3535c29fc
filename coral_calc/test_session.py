# test_session.py

import pytest

from coral_calc.errors import DivideByZeroError, NoPriorAnswerError, ZeroOverZero
from coral_calc.session import Session


def test_calculate_stores_last_answer(session):
    assert session.last_answer is None
    assert session.calculate("2 * 3") == 6
    assert session.last_answer == 6
    assert session.calculate("ans + 1") == 7
    assert session.last_answer == 7
    assert not session.last_failed


def test_failure_keeps_last_answer(session):
    session.calculate("5")
    with pytest.raises(DivideByZeroError):
        session.calculate("1 / 0")
    assert session.last_failed
    assert session.last_answer == 5
    assert session.calculate("ans") == 5
    assert not session.last_failed


def test_ans_without_previous_answer(session):
    with pytest.raises(NoPriorAnswerError):
        session.calculate("ans")
    assert session.last_answer is None


def test_run_line_outcomes(session):
    outcome = session.run_line("1 / 2")
    assert outcome.ok and outcome.value == 0.5 and outcome.text == "0.5"
    assert outcome.error is None

    outcome = session.run_line("5 % 2.5")
    assert not outcome.ok
    assert outcome.value is None
    assert "modulo" in outcome.text
    assert session.last_answer == 0.5


def test_run_line_lets_zero_over_zero_through(session):
    with pytest.raises(ZeroOverZero):
        session.run_line("0 / 0")


def test_sessions_are_independent():
    first, second = Session(), Session()
    first.calculate("9")
    assert second.last_answer is None
