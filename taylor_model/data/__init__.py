"""
Data integration layer for taylor_model.

This package fetches FRED series, aligns them into a quarterly panel and
validates the result.

Example usage:
    >>> from taylor_model.data import FREDData, load_panel_from_fred
    >>> fred = FREDData(api_key="your_key")
    >>> panel = load_panel_from_fred(fred, start_date="1990-01-01")
"""

from taylor_model.data.fred_data import FREDData
from taylor_model.data.panel_builder import (
    align_quarterly,
    build_quarterly_panel,
    load_panel_from_fred,
    read_panel_csv,
)
from taylor_model.data.validation import PanelValidator, ValidationResult

__all__ = [
    'FREDData',
    'align_quarterly',
    'build_quarterly_panel',
    'load_panel_from_fred',
    'read_panel_csv',
    'PanelValidator',
    'ValidationResult',
]
