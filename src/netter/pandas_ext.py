from __future__ import annotations

from typing import TYPE_CHECKING

from netter.core.ipv4 import ScanMode, is_valid_ipv4

if TYPE_CHECKING:
    import pandas as pd


def validate_ipv4_series(
    series: pd.Series,
    mode: ScanMode | str = ScanMode.STRICT,
) -> pd.Series:
    """Validate every value of a Series as an IPv4 address.

    Args:
        series: Series of candidate address strings.
        mode: Scan mode to apply.

    Returns:
        Boolean Series aligned with the input. Missing values and
        non-string values are False.
    """
    return series.apply(lambda x: isinstance(x, str) and is_valid_ipv4(x, mode)).astype(bool)


class IPv4Accessor:
    """Pandas accessor for IPv4 validation.

    Usage:
        >>> from netter.pandas_ext import register_accessor
        >>> register_accessor()
        >>> df = pd.DataFrame({"ip": ["10.0.0.1", "10.256.0.1"]})
        >>> df["ip"].ipv4.is_valid()
    """

    def __init__(self, pandas_obj: pd.Series) -> None:
        """Initialize the accessor.

        Args:
            pandas_obj: The pandas Series this accessor is attached to.
        """
        self._obj = pandas_obj

    def is_valid(self, *, mode: ScanMode | str = ScanMode.STRICT) -> pd.Series:
        """Boolean mask of valid addresses."""
        return validate_ipv4_series(self._obj, mode)

    def invalid(self, *, mode: ScanMode | str = ScanMode.STRICT) -> pd.Series:
        """Subset of the Series holding invalid addresses."""
        return self._obj[~self.is_valid(mode=mode)]


def register_accessor(name: str = "ipv4") -> None:
    """Register the IPv4 accessor on pandas Series.

    After calling this, you can use:
        >>> series.ipv4.is_valid()

    Args:
        name: Name for the accessor (default: "ipv4").
    """
    import pandas as pd

    if not hasattr(pd.Series, name):
        pd.api.extensions.register_series_accessor(name)(IPv4Accessor)
