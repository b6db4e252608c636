#!/usr/bin/env python3
"""
Run the baseline vs. stressed implied-inflation risk analysis.

Usage:
    FRED_API_KEY=... python scripts/run_scenario_analysis.py
    python scripts/run_scenario_analysis.py path/to/panel.csv

Output:
    Text report on stdout, density chart in output/scenario_distributions.png
"""

import logging
import sys
from pathlib import Path

# Add project root to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from taylor_model import ScenarioAnalysis, ScenarioReport, SimulationSettings
from taylor_model.data import FREDData, load_panel_from_fred, read_panel_csv

START_DATE = "1990-01-01"


def main():
    """Load the historical panel, run both scenarios and print the report."""
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

    project_root = Path(__file__).parent.parent
    output_dir = project_root / "output"
    output_dir.mkdir(parents=True, exist_ok=True)

    if len(sys.argv) > 1:
        panel = read_panel_csv(sys.argv[1])
    else:
        fred = FREDData()
        try:
            panel = load_panel_from_fred(fred, start_date=START_DATE)
        except ValueError as e:
            print(f"Error loading FRED data: {e}")
            print("Set FRED_API_KEY or pass a panel CSV path.")
            sys.exit(1)

    analysis = ScenarioAnalysis(panel, SimulationSettings())
    result = analysis.run()

    report = ScenarioReport(result)
    print(report.generate_text_report())
    print(analysis.format_summary(result))

    chart_path = output_dir / "scenario_distributions.png"
    report.plot_distributions(save_path=str(chart_path), show=False)
    print(f"\nChart saved to {chart_path}")


if __name__ == "__main__":
    main()
