"""Step values shared with the step-binding layer.

A step is a Given, When or Then line with its keyword removed. And/But
lines never get a type of their own: they repeat the kind of the step
before them.

Thread Safety:
All step values are frozen (immutable) and safe to share across threads.

"""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class GivenStep:
    """A precondition step."""

    text: str


@dataclass(frozen=True, slots=True)
class WhenStep:
    """An action step."""

    text: str


@dataclass(frozen=True, slots=True)
class ThenStep:
    """An outcome step."""

    text: str


# PEP 695 type alias for step values
type StepType = GivenStep | WhenStep | ThenStep
