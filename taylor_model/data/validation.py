"""
Data validation for the quarterly Taylor rule panel.

Range checks run before moment estimation so that unit mistakes (a rate in
decimals instead of percent, GDP in millions) surface as warnings.
"""

import logging
from dataclasses import dataclass
from typing import List, Optional

import pandas as pd

from ..panel import POTENTIAL_GDP_COLUMN, RATE_COLUMN, REAL_GDP_COLUMN

logger = logging.getLogger(__name__)


@dataclass
class ValidationResult:
    """Outcome of one panel check, rendered as a single log line."""
    check: str
    passed: bool
    message: str
    details: Optional[dict] = None

    def __str__(self) -> str:
        status = "PASS" if self.passed else "FAIL"
        line = f"[{status}] {self.check}: {self.message}"
        if self.details and self.details.get('issues'):
            line += " (" + "; ".join(self.details['issues']) + ")"
        return line


class PanelValidator:
    """
    Validation checks for an aligned quarterly panel.

    Checks:
    - Policy rate in a plausible percent range
    - Real and potential GDP strictly positive
    - Real GDP within a band around potential GDP
    """

    RATE_MIN = -5.0    # percent
    RATE_MAX = 25.0    # percent
    GAP_RATIO_MIN = 0.8
    GAP_RATIO_MAX = 1.2

    @staticmethod
    def validate_policy_rate(df: pd.DataFrame) -> ValidationResult:
        rate = df[RATE_COLUMN]
        outside = rate[(rate < PanelValidator.RATE_MIN) | (rate > PanelValidator.RATE_MAX)]
        if not outside.empty:
            return ValidationResult(
                check="policy_rate",
                passed=False,
                message=(
                    f"{len(outside)} policy rate values outside "
                    f"[{PanelValidator.RATE_MIN}, {PanelValidator.RATE_MAX}] percent"
                ),
                details={'values': outside.tolist()},
            )
        return ValidationResult("policy_rate", passed=True, message="Policy rate within expected range")

    @staticmethod
    def validate_gdp_positive(df: pd.DataFrame) -> ValidationResult:
        issues = []
        for col in (REAL_GDP_COLUMN, POTENTIAL_GDP_COLUMN):
            n_bad = int((df[col] <= 0).sum())
            if n_bad:
                issues.append(f"{n_bad} non-positive values in {col}")
        if issues:
            return ValidationResult(
                check="gdp_positive",
                passed=False,
                message="GDP series contain non-positive values",
                details={'issues': issues},
            )
        return ValidationResult("gdp_positive", passed=True, message="GDP series strictly positive")

    @staticmethod
    def validate_output_gap(df: pd.DataFrame) -> ValidationResult:
        potential = df[POTENTIAL_GDP_COLUMN].where(df[POTENTIAL_GDP_COLUMN] > 0)
        ratio = (df[REAL_GDP_COLUMN] / potential).dropna()
        outside = ratio[(ratio < PanelValidator.GAP_RATIO_MIN) | (ratio > PanelValidator.GAP_RATIO_MAX)]
        if not outside.empty:
            return ValidationResult(
                check="output_gap",
                passed=False,
                message=(
                    f"Real/potential GDP ratio outside "
                    f"[{PanelValidator.GAP_RATIO_MIN}, {PanelValidator.GAP_RATIO_MAX}] "
                    f"in {len(outside)} quarters; check units"
                ),
                details={'min_ratio': float(ratio.min()), 'max_ratio': float(ratio.max())},
            )
        return ValidationResult("output_gap", passed=True, message="Output gap within expected band")

    @staticmethod
    def validate_all(df: pd.DataFrame) -> List[ValidationResult]:
        if df.empty:
            return [ValidationResult("non_empty", passed=False, message="Panel is empty")]

        results = [
            PanelValidator.validate_policy_rate(df),
            PanelValidator.validate_gdp_positive(df),
            PanelValidator.validate_output_gap(df),
        ]
        n_failed = sum(not r.passed for r in results)
        logger.info(f"Panel validation: {len(results) - n_failed}/{len(results)} checks passed")
        return results
