"""Action Results — the closed set of outcomes a form action can produce.

Invariants:
    - Every handler returns ActionResult: Redirect | FormErrors | ActionMessage | None
    - None means success without navigation (caller stays on the current view)
    - Redirect is only produced after the triggering write has committed
    - FormErrors.errors maps form field name -> ordered, de-duplicated messages

Design Decisions:
    - Navigation is a returned value, not a raised control-flow signal: call sites
      and tests compare results instead of catching exceptions
    - Frozen dataclasses: results are values, never mutated after construction
    - to_response() mirrors DashboardError.to_response() so the HTTP shell
      renders both with one envelope shape
"""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class Redirect:
    """Navigate the caller to `path`."""
    path: str


@dataclass(frozen=True)
class FormErrors:
    """Form input failed validation — per-field messages plus a summary."""
    errors: dict[str, list[str]] = field(default_factory=dict)
    message: str = ""

    def to_response(self) -> dict:
        return {"errors": self.errors, "message": self.message}


@dataclass(frozen=True)
class ActionMessage:
    """Action failed with a single user-facing message."""
    message: str

    def to_response(self) -> dict:
        return {"message": self.message}


ActionResult = Redirect | FormErrors | ActionMessage | None
