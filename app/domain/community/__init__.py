"""
Community bounded context, domain layer.

User-submitted questions: sanitizing, validation and the board listing.
"""
