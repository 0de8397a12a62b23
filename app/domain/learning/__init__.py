"""
Learning bounded context, domain layer.

Course and glossary content, the safety-first chat responder
and sitemap composition.
"""
