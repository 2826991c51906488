"""
Sales Dashboard Package.

A live sales dashboard over a Firebase Realtime Database ``sell``
collection, with a command-line summary.
"""
from sales_dashboard.main import run_summary

__version__ = "1.0.0"
