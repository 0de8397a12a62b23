"""
HTTP interface for the market bounded context.
"""
