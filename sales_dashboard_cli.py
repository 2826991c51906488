#!/usr/bin/env python3
"""
CLI entry point for the sales dashboard summary.
"""
import sys
from sales_dashboard.cli.sales_dashboard_cli import main

if __name__ == "__main__":
    sys.exit(main())
