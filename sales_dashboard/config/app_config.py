"""
Application-wide configuration settings for the sales dashboard.
"""
import os

# Page settings
PAGE_TITLE = "Sales Dashboard"
PAGE_ICON = "📊"

# Seconds between re-renders of the live section; the store pushes updates,
# this only controls how often the page picks up the latest snapshot
REFRESH_INTERVAL_SECONDS = float(os.environ.get("SALES_DASHBOARD_REFRESH_SECONDS", "2"))

# Filter settings
ALL_OPTION = "All"
YEAR_OPTION_COUNT = 5

# Display settings
CURRENCY_PREFIX = "Rs."
MISSING_PHONE_TEXT = "N/A"
EMPTY_SALES_TEXT = "No products sold in this period."

# Chart settings
CHART_HEIGHT = 300
CASH_SERIES = "Cash"
ONLINE_SERIES = "Online"
SERIES_COLORS = {
    CASH_SERIES: "#0a1963",
    ONLINE_SERIES: "#f59e0b",
}
LINE_CHART_TITLE = f"Monthly Sales by Payment Method ({CURRENCY_PREFIX})"
BAR_CHART_TITLE = f"Yearly Sales by Payment Method ({CURRENCY_PREFIX})"

# Navigation
LOGIN_URL_PATH = "login"
DASHBOARD_URL_PATH = "dashboard"

# Tabular column layout for sale records
SALE_COLUMNS = [
    "id",
    "product_id",
    "name",
    "description",
    "price",
    "phone_number",
    "sold_at",
    "payment_method",
]
