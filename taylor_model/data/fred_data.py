"""
FRED (Federal Reserve Economic Data) API integration.

Fetches the policy rate and GDP series that make up the historical panel,
with a JSON disk cache so repeated analyses do not hit the API.

API Documentation: https://fred.stlouisfed.org/docs/api/
"""

import json
import logging
import os
from datetime import datetime, timedelta
from io import StringIO
from pathlib import Path
from typing import Optional, Dict, Any

import pandas as pd

logger = logging.getLogger(__name__)

# Try to import fredapi, but handle gracefully if not installed
try:
    from fredapi import Fred
    FRED_AVAILABLE = True
except ImportError:
    FRED_AVAILABLE = False
    logger.warning(
        "fredapi library not installed. FRED data integration will not work. "
        "Install with: pip install fredapi"
    )

POLICY_RATE_SERIES = "FEDFUNDS"      # Effective federal funds rate, monthly, percent
REAL_GDP_SERIES = "GDPC1"            # Real GDP, quarterly, billions of chained dollars
POTENTIAL_GDP_SERIES = "GDPPOT"      # CBO real potential GDP, quarterly


class FREDData:
    """
    Interface to the FRED API for Taylor rule inputs.

    Series are cached for 24 hours. When the API is unreachable or no key is
    configured, cached data is used if present.

    Example:
        >>> fred = FREDData(api_key="your_key_here")
        >>> rate = fred.get_policy_rate(start_date="1990-01-01")
        >>> gdp = fred.get_real_gdp()
    """

    CACHE_HOURS = 24

    def __init__(self, api_key: Optional[str] = None, cache_dir: Optional[str] = None):
        """
        Initialize FRED data interface.

        Args:
            api_key: FRED API key. If None, read from the FRED_API_KEY
                    environment variable
            cache_dir: Directory for the cache file. Defaults to
                      taylor_model/data_files/cache/
        """
        self.fred = None

        if api_key is None:
            api_key = os.environ.get('FRED_API_KEY')

        if not FRED_AVAILABLE:
            logger.error("fredapi library not available. FRED API access disabled.")
        elif api_key is None:
            logger.warning(
                "FRED API key not provided. Set FRED_API_KEY environment variable "
                "or pass api_key parameter. Get free key at: "
                "https://fred.stlouisfed.org/docs/api/api_key.html"
            )
        else:
            try:
                self.fred = Fred(api_key=api_key)
                logger.info("FRED API initialized successfully")
            except ValueError as e:
                logger.error(f"Failed to initialize FRED API: {e}")

        if cache_dir is None:
            module_dir = Path(__file__).parent.parent
            cache_dir = module_dir / "data_files" / "cache"

        self.cache_dir = Path(cache_dir)
        self.cache_dir.mkdir(parents=True, exist_ok=True)
        self.cache_file = self.cache_dir / "fred_cache.json"

        self._cache = self._load_cache()

    def _load_cache(self) -> Dict[str, Any]:
        if self.cache_file.exists():
            try:
                with open(self.cache_file, 'r') as f:
                    cache = json.load(f)
                logger.info(f"Loaded FRED cache with {len(cache)} entries")
                return cache
            except (OSError, json.JSONDecodeError) as e:
                logger.warning(f"Failed to load cache: {e}")
        return {}

    def _save_cache(self):
        try:
            with open(self.cache_file, 'w') as f:
                json.dump(self._cache, f, indent=2)
        except OSError as e:
            logger.warning(f"Failed to save cache: {e}")

    def _is_cache_fresh(self, series_id: str, max_age_hours: int = CACHE_HOURS) -> bool:
        if series_id not in self._cache:
            return False

        cached_time = datetime.fromisoformat(self._cache[series_id]['timestamp'])
        return datetime.now() - cached_time < timedelta(hours=max_age_hours)

    def get_series(self, series_id: str, start_date: Optional[str] = None,
                   use_cache: bool = True) -> pd.Series:
        """
        Get a FRED data series.

        Args:
            series_id: FRED series ID (e.g., 'FEDFUNDS', 'GDPC1')
            start_date: Start date in YYYY-MM-DD format. If None, gets all data.
            use_cache: If True, use cached data if fresh

        Returns:
            pandas Series with a DatetimeIndex

        Raises:
            ValueError: If FRED API not available and no cached copy reaches
                back to start_date
        """
        covered = self._cache_covers(series_id, start_date)

        if self.fred is None:
            if use_cache and covered:
                logger.warning(f"FRED API unavailable, using cached {series_id}")
                return self._series_from_cache(series_id, start_date)
            if series_id in self._cache and not covered:
                logger.warning(f"Cached {series_id} starts after {start_date}")
            raise ValueError("FRED API not available and no cache found")

        if use_cache and covered and self._is_cache_fresh(series_id):
            logger.info(f"Using cached FRED data for {series_id}")
            return self._series_from_cache(series_id, start_date)

        try:
            logger.info(f"Fetching {series_id} from FRED API")
            series = self.fred.get_series(series_id, observation_start=start_date)
        except Exception as e:
            logger.error(f"FRED API call failed for {series_id}: {e}")
            if covered:
                logger.warning(f"Using stale cached data for {series_id}")
                return self._series_from_cache(series_id, start_date)
            raise

        self._cache[series_id] = {
            'timestamp': datetime.now().isoformat(),
            'data': series.to_json(date_format='iso'),
            'start_date': start_date,
        }
        self._save_cache()
        return series

    def _cache_covers(self, series_id: str, start_date: Optional[str]) -> bool:
        """True if the cached copy reaches back at least to start_date."""
        if series_id not in self._cache:
            return False
        cached_start = self._cache[series_id].get('start_date')
        if cached_start is None:
            return True
        if start_date is None:
            return False
        return pd.Timestamp(cached_start) <= pd.Timestamp(start_date)

    def _series_from_cache(self, series_id: str,
                           start_date: Optional[str] = None) -> pd.Series:
        """Reconstruct pandas Series from cached JSON, trimmed to start_date."""
        cached_json = self._cache[series_id]['data']
        series = pd.read_json(StringIO(cached_json), typ='series')
        series.index = pd.to_datetime(series.index)
        if series.index.tz is not None:
            series.index = series.index.tz_convert(None)
        series = series.sort_index()
        if start_date is not None:
            series = series[series.index >= pd.Timestamp(start_date)]
        return series

    def get_latest_value(self, series_id: str) -> float:
        series = self.get_series(series_id)
        return float(series.dropna().iloc[-1])

    # Taylor rule inputs

    def get_policy_rate(self, start_date: Optional[str] = None) -> pd.Series:
        """Monthly effective federal funds rate (percent)."""
        return self.get_series(POLICY_RATE_SERIES, start_date=start_date)

    def get_real_gdp(self, start_date: Optional[str] = None) -> pd.Series:
        """Quarterly real GDP (billions of chained dollars)."""
        return self.get_series(REAL_GDP_SERIES, start_date=start_date)

    def get_potential_gdp(self, start_date: Optional[str] = None) -> pd.Series:
        """Quarterly CBO real potential GDP. Includes CBO projections beyond today."""
        return self.get_series(POTENTIAL_GDP_SERIES, start_date=start_date)

    def clear_cache(self, older_than_hours: Optional[int] = None):
        """
        Clear cached FRED data.

        Args:
            older_than_hours: If specified, only clear cache older than this.
                            If None, clear all cache.
        """
        if older_than_hours is None:
            self._cache = {}
            logger.info("Cleared all FRED cache")
        else:
            cutoff = datetime.now() - timedelta(hours=older_than_hours)
            original_count = len(self._cache)

            self._cache = {
                k: v for k, v in self._cache.items()
                if datetime.fromisoformat(v['timestamp']) > cutoff
            }

            removed = original_count - len(self._cache)
            logger.info(f"Cleared {removed} stale cache entries older than {older_than_hours} hours")

        self._save_cache()

    def get_cache_status(self) -> Dict[str, Dict]:
        """Map each cached series_id to its timestamp, age and freshness."""
        status = {}
        now = datetime.now()

        for series_id, cache_entry in self._cache.items():
            cached_time = datetime.fromisoformat(cache_entry['timestamp'])
            age = now - cached_time

            status[series_id] = {
                'timestamp': cache_entry['timestamp'],
                'age_hours': age.total_seconds() / 3600,
                'fresh': age < timedelta(hours=self.CACHE_HOURS)
            }

        return status

    def is_available(self) -> bool:
        """Check if FRED API is available and configured."""
        return self.fred is not None
