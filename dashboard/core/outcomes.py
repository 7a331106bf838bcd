"""Action Outcomes — explicit result variants returned by the action orchestrator.

Invariants:
    - A Redirect is only produced after validation passed
    - An ErrorState carries every field error at once, keyed by form field name
    - Outcomes are data; the HTTP layer decides how to render them

Design Decisions:
    - Result variants over control-transferring redirect calls: the caller
      performs navigation, nothing jumps out of the orchestrator
"""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class Redirect:
    """Mutation accepted — navigate to `path`."""
    path: str


@dataclass(frozen=True)
class Revalidated:
    """Mutation accepted — `path` was invalidated, caller stays on its view."""
    path: str


@dataclass(frozen=True)
class ErrorState:
    """Validation failed — field messages plus a summary for the form."""
    message: str
    errors: dict[str, list[str]] = field(default_factory=dict)

    def to_response(self) -> dict:
        return {"errors": self.errors, "message": self.message}


ActionOutcome = Redirect | ErrorState
