from __future__ import annotations

from dataclasses import dataclass, replace

from relkit.core.result import Err, Ok, Result
from relkit.release.errors import ReleaseError
from relkit.release.fsm import StepOutcome, advance, finish, run_state_machine


@dataclass(frozen=True, slots=True)
class _State:
    step: str
    counter: int


def test_run_state_machine_advances_and_traces() -> None:
    seen: list[tuple[str, str]] = []

    def step_a(s: _State) -> Result[StepOutcome[_State, str], ReleaseError]:
        return Ok(advance(replace(s, step="b", counter=s.counter + 1)))

    def step_b(s: _State) -> Result[StepOutcome[_State, str], ReleaseError]:
        return Ok(finish(f"done after {s.counter}"))

    result = run_state_machine(
        initial_state=_State(step="a", counter=0),
        get_step=lambda s: s.step,
        handlers={"a": step_a, "b": step_b},
        on_transition=lambda prev, cur: seen.append((prev.step, cur.step)),
    )

    assert result == Ok("done after 1")
    assert seen == [("a", "b")]


def test_run_state_machine_unknown_step_fails() -> None:
    result = run_state_machine(
        initial_state=_State(step="missing", counter=0),
        get_step=lambda s: s.step,
        handlers={},
    )

    assert isinstance(result, Err)
    assert result.error.kind == "invalid_input"
    assert "missing" in result.error.message


def test_run_state_machine_propagates_handler_error() -> None:
    def bad_step(_: _State) -> Result[StepOutcome[_State, str], ReleaseError]:
        return Err(ReleaseError(kind="hook_failed", message="boom"))

    result = run_state_machine(
        initial_state=_State(step="a", counter=0),
        get_step=lambda s: s.step,
        handlers={"a": bad_step},
    )

    assert isinstance(result, Err)
    assert result.error.message == "boom"


def test_run_state_machine_can_revisit_a_step() -> None:
    def loop(s: _State) -> Result[StepOutcome[_State, int], ReleaseError]:
        if s.counter == 3:
            return Ok(finish(s.counter))
        return Ok(advance(replace(s, counter=s.counter + 1)))

    result = run_state_machine(
        initial_state=_State(step="a", counter=0),
        get_step=lambda s: s.step,
        handlers={"a": loop},
    )

    assert result == Ok(3)
