"""Design objectives evaluated against a session's current performance.

An objective is a named predicate over ``(performance, session)``. The
factories below cover the targets used by test-fire contracts.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable, NamedTuple

from rocket_workshop.core.performance import EnginePerformance

if TYPE_CHECKING:
    from rocket_workshop.core.session import DesignSession

ObjectiveCheck = Callable[[EnginePerformance, "DesignSession"], bool]


@dataclass(frozen=True)
class Objective:
    """A design target.

    Args:
        id: Short identifier.
        description: Human-readable statement of the target.
        check: Predicate evaluated against performance and session state.
        primary: Whether the objective is mandatory for success.
    """

    id: str
    description: str
    check: ObjectiveCheck
    primary: bool = True


class ObjectiveStatus(NamedTuple):
    objective: Objective
    met: bool


def thrust_at_least(thrust_kn: float) -> Objective:
    return Objective(
        id="thrust",
        description=f"Achieve {thrust_kn:g} kN thrust at sea level",
        check=lambda perf, _session: perf.thrust >= thrust_kn,
    )


def successful_test() -> Objective:
    return Objective(
        id="success",
        description="Complete a successful test fire",
        check=lambda perf, _session: perf.is_valid and perf.thrust > 0,
    )


def within_budget() -> Objective:
    return Objective(
        id="budget",
        description="Stay within budget",
        check=lambda _perf, session: session.spent_budget <= session.total_budget,
        primary=False,
    )


def thrust_to_weight_at_least(ratio: float) -> Objective:
    return Objective(
        id="thrust_to_weight",
        description=f"Reach a thrust-to-weight ratio of at least {ratio:g}",
        check=lambda perf, _session: perf.is_valid and perf.thrust_to_weight >= ratio,
    )


def burn_time_at_least(seconds: float) -> Objective:
    return Objective(
        id="burn_time",
        description=f"Burn for at least {seconds:g} s",
        check=lambda perf, _session: perf.is_valid and perf.burn_time >= seconds,
        primary=False,
    )
