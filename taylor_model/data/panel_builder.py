"""
Quarterly panel construction.

Aligns the monthly policy rate with the quarterly GDP series and returns a
HistoricalPanel ready for moment estimation.
"""

import logging
from pathlib import Path
from typing import Optional, Union

import pandas as pd

from ..panel import (
    DATE_COLUMN,
    POTENTIAL_GDP_COLUMN,
    RATE_COLUMN,
    REAL_GDP_COLUMN,
    HistoricalPanel,
)
from .fred_data import FREDData
from .validation import PanelValidator

logger = logging.getLogger(__name__)

QUARTER_FREQ = "QS"


def _to_quarterly(series: pd.Series) -> pd.Series:
    """Quarter-start average of any higher-frequency series."""
    series = series.copy()
    series.index = pd.to_datetime(series.index)
    return series.sort_index().resample(QUARTER_FREQ).mean()


def align_quarterly(nominal_rate: pd.Series,
                    real_gdp: pd.Series,
                    potential_gdp: pd.Series,
                    start_date: Optional[str] = None,
                    end_date: Optional[str] = None) -> pd.DataFrame:
    """
    Align three series onto a common quarterly index.

    Monthly or daily inputs are averaged within each quarter. Interior gaps
    are filled by time interpolation; quarters still missing a value (for
    example potential GDP projections past the last real GDP release) are
    dropped.

    Returns:
        DataFrame with columns date, nominal_rate, real_gdp, potential_gdp
    """
    df = pd.concat(
        {
            RATE_COLUMN: _to_quarterly(nominal_rate),
            REAL_GDP_COLUMN: _to_quarterly(real_gdp),
            POTENTIAL_GDP_COLUMN: _to_quarterly(potential_gdp),
        },
        axis=1,
    )

    if start_date is not None:
        df = df[df.index >= pd.Timestamp(start_date)]
    if end_date is not None:
        df = df[df.index <= pd.Timestamp(end_date)]

    df = df.interpolate(method="time", limit_area="inside").dropna()

    logger.info(
        f"Aligned quarterly panel: {len(df)} quarters"
        + (f" from {df.index[0].date()} to {df.index[-1].date()}" if len(df) else "")
    )
    return df.rename_axis(DATE_COLUMN).reset_index()


def build_quarterly_panel(nominal_rate: pd.Series,
                          real_gdp: pd.Series,
                          potential_gdp: pd.Series,
                          start_date: Optional[str] = None,
                          end_date: Optional[str] = None,
                          validate: bool = True) -> HistoricalPanel:
    """Align the series and wrap them in a HistoricalPanel."""
    df = align_quarterly(nominal_rate, real_gdp, potential_gdp, start_date, end_date)

    if validate:
        for check in PanelValidator.validate_all(df):
            if not check.passed:
                logger.warning(str(check))

    return HistoricalPanel.from_dataframe(df)


def load_panel_from_fred(fred: FREDData,
                         start_date: Optional[str] = None,
                         end_date: Optional[str] = None) -> HistoricalPanel:
    """
    Fetch FEDFUNDS, GDPC1 and GDPPOT and build the quarterly panel.

    Raises:
        ValueError: If FRED is unavailable and nothing is cached
    """
    return build_quarterly_panel(
        fred.get_policy_rate(start_date=start_date),
        fred.get_real_gdp(start_date=start_date),
        fred.get_potential_gdp(start_date=start_date),
        start_date=start_date,
        end_date=end_date,
    )


def read_panel_csv(path: Union[str, Path]) -> HistoricalPanel:
    """Read a previously aligned panel from CSV (columns as in PANEL_COLUMNS)."""
    df = pd.read_csv(path, parse_dates=[DATE_COLUMN])
    return HistoricalPanel.from_dataframe(df)
