from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import TypeVar

from relkit.core.result import Err, Ok, Result
from relkit.release.errors import ReleaseError

S = TypeVar("S")
R = TypeVar("R")


@dataclass(frozen=True, slots=True)
class StepAdvance[S]:
    session: S


@dataclass(frozen=True, slots=True)
class StepFinish[R]:
    outcome: R


type StepOutcome[S, R] = StepAdvance[S] | StepFinish[R]
type StepHandler[S, R] = Callable[[S], Result[StepOutcome[S, R], ReleaseError]]
type GetStep[S] = Callable[[S], str]
type OnTransition[S] = Callable[[S, S], None]


def advance[S](session: S) -> StepAdvance[S]:
    return StepAdvance(session=session)


def finish[R](outcome: R) -> StepFinish[R]:
    return StepFinish(outcome=outcome)


def run_state_machine[S, R](
    *,
    initial_state: S,
    get_step: GetStep[S],
    handlers: Mapping[str, StepHandler[S, R]],
    on_transition: OnTransition[S] | None = None,
) -> Result[R, ReleaseError]:
    """Drive ``handlers`` from ``initial_state`` until one finishes or fails.

    Each handler sees the current session and returns either the next
    session (whose step selects the next handler), a terminal outcome, or
    an error.
    """
    current = initial_state

    while True:
        step = get_step(current)
        handler = handlers.get(step)
        if handler is None:
            return Err(ReleaseError(kind="invalid_input", message=f"unknown release step: {step}"))

        outcome = handler(current)
        if isinstance(outcome, Err):
            return outcome

        if isinstance(outcome.value, StepFinish):
            return Ok(outcome.value.outcome)

        previous, current = current, outcome.value.session
        if on_transition is not None:
            on_transition(previous, current)
