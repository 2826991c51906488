"""
Base exporter interface for exporting dashboard data.
"""
from abc import ABC, abstractmethod

import pandas as pd

from sales_dashboard.utils.formatting import format_phone

EXPORT_COLUMNS = {
    "id": "Sale ID",
    "product_id": "Product ID",
    "name": "Product Name",
    "description": "Description",
    "price": "Price",
    "payment_method": "Payment Method",
    "phone_number": "Phone Number",
    "sold_at": "Sold At",
}


class BaseExporter(ABC):
    """
    Abstract base class for exporters of filtered sales and monthly totals.
    """

    @abstractmethod
    def export(self, sales: pd.DataFrame, monthly: pd.DataFrame, output_dir: str) -> str:
        """
        Export the sales and the monthly totals.

        Args:
            sales (pd.DataFrame): Filtered sale list
            monthly (pd.DataFrame): Output of ``monthly_totals``
            output_dir (str): Directory for output files

        Returns:
            str: Path to the exported data
        """
        pass

    def prepare_dataframe(self, sales: pd.DataFrame) -> pd.DataFrame:
        """
        Prepare the sale list for export.

        Args:
            sales (pd.DataFrame): Filtered sale list

        Returns:
            pd.DataFrame: Sales with readable headers, ordered by sale time
        """
        df = sales.sort_values("sold_at")[list(EXPORT_COLUMNS)].copy()
        df["price"] = df["price"].round(2)
        df["phone_number"] = df["phone_number"].map(format_phone)
        df["sold_at"] = df["sold_at"].dt.strftime("%Y-%m-%d %H:%M:%S")
        return df.rename(columns=EXPORT_COLUMNS).reset_index(drop=True)
