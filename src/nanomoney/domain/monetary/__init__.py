"""Monetary domain package.

This package contains the MonetaryAmount value type (whole units plus nanos and a currency tag)
and pure functions for exact fixed-point arithmetic, comparison and formatting over it.
"""
