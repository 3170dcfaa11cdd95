"""
Application layer package.

Contains use cases that orchestrate domain logic and ports.
Use cases receive their dependencies through the constructor.
"""
