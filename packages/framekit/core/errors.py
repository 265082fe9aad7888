"""Error taxonomy for the motion engine.

Every error is raised synchronously at the call that detects it. Nothing in
the core retries or recovers internally.
"""

from __future__ import annotations


class InvalidConfiguration(ValueError):
    """Raised when a configuration value would produce wrong or undefined visuals.

    Covers non-positive spring parameters, invalid seeds, malformed
    breakpoint sets, negative node counts, bad stagger delays, unknown
    effect types and unrecognized effect options. Detected at construction
    time so rendering never starts from a broken configuration.
    """


class ConvergenceAssumptionViolated(RuntimeError):
    """Raised when a spring evaluation leaves the bounded, convergent regime.

    Diagnostic only: accepted spring configurations never trigger it.
    """
