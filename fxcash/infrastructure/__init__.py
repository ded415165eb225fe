"""
Infrastructure Layer - Registry implementations, logging and wiring

Provides in-memory subscription and security registries satisfying the
domain interfaces, structured logging setup, and the container assembling
application objects from configuration.
"""
