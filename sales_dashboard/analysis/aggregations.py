"""
Aggregates over a set of sales: totals, payment-method splits and the
per-month chart series.
"""
import pandas as pd

from sales_dashboard.config.app_config import CASH_SERIES, ONLINE_SERIES
from sales_dashboard.data.models.sales import PaymentMethod, SalesSummary
from sales_dashboard.utils.date_helpers import MONTH_ABBREVIATIONS

SERIES_BY_METHOD = {
    PaymentMethod.CASH.value: CASH_SERIES,
    PaymentMethod.ONLINE.value: ONLINE_SERIES,
}


def summarize(sales: pd.DataFrame) -> SalesSummary:
    """
    Compute count and price totals for a set of sales.

    Args:
        sales (pd.DataFrame): The sales to summarize

    Returns:
        SalesSummary: Count, total and per-payment-method figures
    """
    is_cash = sales["payment_method"] == PaymentMethod.CASH.value
    is_online = sales["payment_method"] == PaymentMethod.ONLINE.value

    return SalesSummary(
        count=len(sales),
        total=float(sales["price"].sum()),
        cash_total=float(sales.loc[is_cash, "price"].sum()),
        online_total=float(sales.loc[is_online, "price"].sum()),
        cash_count=int(is_cash.sum()),
        online_count=int(is_online.sum()),
    )


def monthly_totals(sales: pd.DataFrame) -> pd.DataFrame:
    """
    Compute cash and online totals for each calendar month.

    Sales from different years that share a month are added together.

    Args:
        sales (pd.DataFrame): The sales to aggregate

    Returns:
        pd.DataFrame: Twelve rows (Jan..Dec) with columns month, Cash, Online
    """
    totals = pd.DataFrame(0.0, index=range(1, 13), columns=[CASH_SERIES, ONLINE_SERIES])

    known = sales[sales["payment_method"].isin(SERIES_BY_METHOD.keys())]
    if not known.empty:
        grouped = (
            known.groupby([known["sold_at"].dt.month, "payment_method"])["price"]
            .sum()
            .unstack(fill_value=0.0)
            .rename(columns=SERIES_BY_METHOD)
        )
        totals = totals.add(grouped.reindex(columns=totals.columns), fill_value=0.0)

    totals.insert(0, "month", list(MONTH_ABBREVIATIONS))
    return totals.reset_index(drop=True)
