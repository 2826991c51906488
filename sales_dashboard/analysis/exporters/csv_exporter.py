"""
CSV exporter for filtered sales.
"""
import os

import pandas as pd

from sales_dashboard.analysis.exporters.base_exporter import BaseExporter
from sales_dashboard.utils.logging_config import get_logger

# Set up logging
logger = get_logger(__name__)


class CSVExporter(BaseExporter):
    """
    Writes ``sales.csv`` and ``monthly_totals.csv`` into a directory.
    """

    def export(self, sales: pd.DataFrame, monthly: pd.DataFrame, output_dir: str) -> str:
        os.makedirs(output_dir, exist_ok=True)

        sales_path = os.path.join(output_dir, "sales.csv")
        self.prepare_dataframe(sales).to_csv(sales_path, index=False)
        logger.info(f"Exported {len(sales)} sales to {sales_path}")

        monthly_path = os.path.join(output_dir, "monthly_totals.csv")
        monthly.round(2).to_csv(monthly_path, index=False)
        logger.info(f"Exported monthly totals to {monthly_path}")

        return output_dir
