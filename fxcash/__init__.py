"""
fxcash - Foreign currency cash tracking for trading and backtesting engines.

Tracks non-account-currency cash holdings, resolves the FX data feed needed to
price each currency, and keeps conversion rates current as market data arrives.
"""

__version__ = "0.1.0"
