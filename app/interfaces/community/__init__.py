"""
HTTP interface for the community bounded context.
"""
