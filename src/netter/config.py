"""Environment-driven settings."""

from __future__ import annotations

import os
import warnings

from netter.core.ipv4 import ScanMode

MODE_ENV = "NETTER_IPV4_MODE"


def get_scan_mode() -> ScanMode:
    """Read the default scan mode from ``NETTER_IPV4_MODE``.

    Unset means strict. Unknown values fall back to strict with a warning.
    """
    raw = os.getenv(MODE_ENV, ScanMode.STRICT.value).strip().lower()
    try:
        return ScanMode(raw)
    except ValueError:
        warnings.warn(
            (
                f"Unknown {MODE_ENV} value {raw!r}; expected one of "
                f"{', '.join(m.value for m in ScanMode)}. Using strict."
            ),
            RuntimeWarning,
            stacklevel=2,
        )
        return ScanMode.STRICT
