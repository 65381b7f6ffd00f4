"""
Reports module for financial reports.

This module provides the profit & loss report, aggregated from sales,
sale items and daily expenses, the top selling products ranking and the
balance sheet snapshot.
"""

from backoffice.reports.routes import router

__all__ = ["router"]
