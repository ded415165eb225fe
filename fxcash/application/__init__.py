"""
Application Layer - Configuration and use cases

Orchestrates the domain cash book: loads configuration and exposes use cases
for feed resolution, conversion rate updates and balance reporting.
"""
