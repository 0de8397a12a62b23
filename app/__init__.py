"""
Buysolanas: learning backend for Solana newcomers.

Application package root. This is a modular monolith using
hexagonal architecture (ports & adapters) with domain-driven design.

Bounded contexts:
    - market: Live price table with tiered fallback and caching.
    - learning: Course/glossary content, safety-first chat, sitemap.
    - community: Question board backed by a hosted datastore.

Layers:
    - domain: Pure business logic, entities, ports (ABCs), errors.
    - application: Use cases, DTOs, orchestration.
    - infrastructure: Adapters (HTTP provider, DB, filesystem) implementing domain ports.
    - interfaces: FastAPI routers, Pydantic schemas.
    - shared: Cross-cutting concerns (errors, security, logging, caching).
"""
