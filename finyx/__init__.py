"""
Finyx - Personal Finance Dashboard Service

A FastAPI-based service that records income and expense transactions,
summarizes the current month and serves display-ready dashboard data.
"""

__version__ = "0.1.0"
