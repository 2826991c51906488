"""
Backend connectors.
"""
