"""
HTTP interface for the learning bounded context.
"""
