"""
restful-users: CRUD HTTP service for user records.

Application package root. A small modular monolith using
hexagonal architecture (ports & adapters).

Bounded contexts:
    - users: User records, age eligibility, partial patch, birth date search.

Layers:
    - domain: Pure business logic, entities, ports (ABCs), errors.
    - application: Use cases, DTOs, orchestration.
    - infrastructure: Adapters (SQL database) implementing domain ports.
    - interfaces: FastAPI routers, Pydantic schemas.
    - shared: Cross-cutting concerns (errors, security, logging).
"""
