"""
Infrastructure adapters for the learning bounded context.

Each adapter implements a domain port (ABC) and connects
to an external system.
"""
