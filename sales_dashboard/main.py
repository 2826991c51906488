"""
One-shot sales summary, the non-interactive counterpart of the dashboard.
"""
import logging
from dataclasses import dataclass
from typing import Optional

import pandas as pd

from sales_dashboard.analysis.aggregations import monthly_totals, summarize
from sales_dashboard.analysis.exporters.csv_exporter import CSVExporter
from sales_dashboard.analysis.filters import filter_sales
from sales_dashboard.data.connectors.base_connector import BaseConnector
from sales_dashboard.data.connectors.firebase_connector import get_connector, reset_connector
from sales_dashboard.data.models.sales import FilterCriteria, SalesSummary
from sales_dashboard.data.repositories.sales_repository import SalesRepository
from sales_dashboard.utils.logging_config import setup_logging


@dataclass
class SummaryReport:
    """
    Result of a summary run.
    """
    filter_criteria: FilterCriteria
    summary: SalesSummary
    monthly: pd.DataFrame
    sales: pd.DataFrame
    output_dir: Optional[str] = None


class SalesSummaryApp:
    """
    Reads the sale list once, filters it and aggregates it.
    """

    def __init__(self, connector: Optional[BaseConnector] = None, log_level=logging.INFO):
        """
        Initialize the application.

        Args:
            connector (Optional[BaseConnector]): Backend connector (default: the process-wide one)
            log_level: Logging level
        """
        self.logger = setup_logging(log_level=log_level)
        self.connector = connector if connector is not None else get_connector()
        self.sales_repository = SalesRepository(self.connector)

    def run(self, filter_criteria: FilterCriteria, output_dir: Optional[str] = None) -> SummaryReport:
        """
        Build the summary for the given filters.

        Args:
            filter_criteria (FilterCriteria): Month/year/day selectors
            output_dir (Optional[str]): If set, export CSV files there

        Returns:
            SummaryReport: The summary, monthly totals and filtered sales
        """
        self.logger.info(
            f"Summarizing sales for month={filter_criteria.month}, "
            f"year={filter_criteria.year}, day={filter_criteria.day}"
        )

        sales = self.sales_repository.get_raw_data()
        filtered = filter_sales(sales, filter_criteria)
        summary = summarize(filtered)
        monthly = monthly_totals(filtered)

        self.logger.info(f"{summary.count} of {len(sales)} sales match the filters.")

        if output_dir:
            output_dir = CSVExporter().export(filtered, monthly, output_dir)

        return SummaryReport(
            filter_criteria=filter_criteria,
            summary=summary,
            monthly=monthly,
            sales=filtered,
            output_dir=output_dir,
        )


def run_summary(
    month: Optional[int] = None,
    year: Optional[int] = None,
    day: Optional[int] = None,
    output_dir: Optional[str] = None,
    log_level: int = logging.INFO
) -> SummaryReport:
    """
    Summarize sales with the specified filters.

    Args:
        month (Optional[int]): Month number, or None for all
        year (Optional[int]): Year, or None for all
        day (Optional[int]): Day of month; requires month and year
        output_dir (Optional[str]): Directory for CSV export
        log_level (int): Logging level

    Returns:
        SummaryReport: The summary report
    """
    filter_criteria = FilterCriteria()
    filter_criteria.set_month(month)
    filter_criteria.set_year(year)
    filter_criteria.set_day(day)

    app = SalesSummaryApp(log_level=log_level)
    try:
        return app.run(filter_criteria, output_dir=output_dir)
    finally:
        # Release the process-wide Firebase app after the one-shot read
        reset_connector()
