from __future__ import annotations

from typing import Optional


class SpaError(Exception):
    """Base error."""


class SpaRangeError(SpaError, ValueError):
    """Raised by the binding layer when an argument is outside its physical bounds."""


class SpaCalculationError(SpaError):
    """Raised when the core reports a non-zero error code."""

    def __init__(self, error_code: int, field: Optional[str] = None):
        self.error_code = int(error_code)
        self.field = field
        what = f" ({field} out of range)" if field else ""
        super().__init__(f"SPA: calculation failed (error code {self.error_code}){what}")
