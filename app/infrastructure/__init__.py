"""
Infrastructure layer package.

Contains concrete implementations (adapters) of the ports
defined in the domain layer. This is where databases, APIs,
HTTP providers, the filesystem and other external integrations live.
"""
