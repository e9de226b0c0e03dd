"""Error taxonomy for pressure-path computation.

Every failure is local to one call. Hard failures raise a ``PressurePathError``
subclass; a refinement run that hits its evaluation cap is reported through a
``RefinementLimitExceeded`` warning on the result instead.
"""

from __future__ import annotations


class PressurePathError(ValueError):
    """Base class for all domain errors. ``code`` is stable across releases."""

    code = "pressure_path_error"


class InvalidWidthProfile(PressurePathError):
    code = "invalid_width_profile"


class InsufficientPathData(PressurePathError):
    code = "insufficient_path_data"


class InsufficientSamples(PressurePathError):
    code = "insufficient_samples"


class PathSyntaxError(PressurePathError):
    code = "path_syntax_error"


class PathEditError(PressurePathError):
    code = "path_edit_error"


class RefinementLimitExceeded(UserWarning):
    """The sampler stopped refining before every interval converged."""

    code = "refinement_limit_exceeded"

    def __init__(self, evaluations: int, limit: int, pending: int) -> None:
        self.evaluations = evaluations
        self.limit = limit
        self.pending = pending
        super().__init__(
            f"refinement stopped after {evaluations} evaluations (limit {limit}); "
            f"{pending} interval(s) accepted unrefined"
        )
