"""
Historical Panel

Immutable container for the aligned quarterly observations that feed the
moment estimator: nominal policy rate, real GDP and potential GDP.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Iterable, Mapping

import numpy as np
import pandas as pd

from .exceptions import PanelFormatError

logger = logging.getLogger(__name__)

DATE_COLUMN = "date"
RATE_COLUMN = "nominal_rate"
REAL_GDP_COLUMN = "real_gdp"
POTENTIAL_GDP_COLUMN = "potential_gdp"

PANEL_COLUMNS = [DATE_COLUMN, RATE_COLUMN, REAL_GDP_COLUMN, POTENTIAL_GDP_COLUMN]


@dataclass(frozen=True, eq=False)
class HistoricalPanel:
    """
    Quarterly panel of policy rate, real GDP and potential GDP.

    Build with ``from_dataframe`` or ``from_records``; both validate that the
    required columns exist, that no value is missing and that dates are
    strictly increasing. Accessors return copies so the panel cannot be
    mutated after construction.
    """
    _frame: pd.DataFrame

    @classmethod
    def from_dataframe(cls, df: pd.DataFrame) -> "HistoricalPanel":
        """
        Build a panel from a DataFrame.

        A DatetimeIndex named ``date`` (or unnamed) is accepted in place of a
        ``date`` column.
        """
        frame = df.copy()
        if DATE_COLUMN not in frame.columns and isinstance(frame.index, pd.DatetimeIndex):
            frame = frame.rename_axis(DATE_COLUMN).reset_index()

        missing = [col for col in PANEL_COLUMNS if col not in frame.columns]
        if missing:
            raise PanelFormatError(f"Panel missing required columns: {missing}")

        frame = frame[PANEL_COLUMNS].reset_index(drop=True)
        frame[DATE_COLUMN] = pd.to_datetime(frame[DATE_COLUMN])

        for col in (RATE_COLUMN, REAL_GDP_COLUMN, POTENTIAL_GDP_COLUMN):
            try:
                frame[col] = frame[col].astype(float)
            except (TypeError, ValueError) as e:
                raise PanelFormatError(f"Column {col} is not numeric: {e}") from e

        if frame.isna().any().any():
            bad = frame.columns[frame.isna().any()].tolist()
            raise PanelFormatError(f"Panel has missing values in columns: {bad}")

        if len(frame) > 1 and not (frame[DATE_COLUMN].diff().iloc[1:] > pd.Timedelta(0)).all():
            raise PanelFormatError("Panel dates must be strictly increasing")

        logger.debug(f"Constructed historical panel with {len(frame)} quarters")
        return cls(frame)

    @classmethod
    def from_records(cls, records: Iterable[Mapping[str, Any]]) -> "HistoricalPanel":
        """Build a panel from an iterable of dict-like quarterly records."""
        return cls.from_dataframe(pd.DataFrame(list(records), columns=PANEL_COLUMNS))

    def __len__(self) -> int:
        return len(self._frame)

    @property
    def dates(self) -> pd.DatetimeIndex:
        return pd.DatetimeIndex(self._frame[DATE_COLUMN])

    @property
    def nominal_rate(self) -> np.ndarray:
        return self._frame[RATE_COLUMN].to_numpy(copy=True)

    @property
    def real_gdp(self) -> np.ndarray:
        return self._frame[REAL_GDP_COLUMN].to_numpy(copy=True)

    @property
    def potential_gdp(self) -> np.ndarray:
        return self._frame[POTENTIAL_GDP_COLUMN].to_numpy(copy=True)

    @property
    def output_gap_pct(self) -> np.ndarray:
        """Output gap as percent of potential GDP."""
        return (self.real_gdp / self.potential_gdp - 1) * 100

    def to_dataframe(self) -> pd.DataFrame:
        """Return a copy of the panel as a DataFrame."""
        return self._frame.copy()
