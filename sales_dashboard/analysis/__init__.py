"""
Filtering and aggregation over the sale list.
"""
from sales_dashboard.analysis.filters import filter_sales, today_sales
from sales_dashboard.analysis.aggregations import summarize, monthly_totals
