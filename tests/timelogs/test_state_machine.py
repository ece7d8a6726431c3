import pytest

from src.worktrack.worktrack.core.enums import AttendanceState, LogType
from src.worktrack.worktrack.core.exceptions import InvalidTransitionError
from src.worktrack.worktrack.timelogs.state_machine import guard_transition, state_from_latest, transition


def test_no_history_means_checked_out():
    assert state_from_latest(None) == AttendanceState.CHECKED_OUT


def test_state_follows_latest_event():
    assert state_from_latest(LogType.CHECK_IN) == AttendanceState.CHECKED_IN
    assert state_from_latest(LogType.CHECK_OUT) == AttendanceState.CHECKED_OUT


def test_legal_transitions():
    assert transition(AttendanceState.CHECKED_OUT, LogType.CHECK_IN) == AttendanceState.CHECKED_IN
    assert transition(AttendanceState.CHECKED_IN, LogType.CHECK_OUT) == AttendanceState.CHECKED_OUT


@pytest.mark.parametrize(
    "state,log_type",
    [
        (AttendanceState.CHECKED_IN, LogType.CHECK_IN),
        (AttendanceState.CHECKED_OUT, LogType.CHECK_OUT),
    ],
)
def test_illegal_transitions_raise(state, log_type):
    with pytest.raises(InvalidTransitionError):
        transition(state, log_type)


def test_guard_checks_against_latest_type():
    guard = guard_transition(LogType.CHECK_OUT)
    assert guard(LogType.CHECK_IN) == AttendanceState.CHECKED_OUT
    with pytest.raises(InvalidTransitionError):
        guard(None)
