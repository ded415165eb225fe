"""
Domain Layer - Pure Business Logic

This layer contains:
- Entities: Cash holdings, the cash book, securities and subscriptions
- Value Objects: Currency symbols, resolutions, market data points
- Services: Currency feed resolution that spans entities and registries

No external dependencies allowed in this layer.
"""
