"""
Infrastructure layer package.

Contains concrete implementations (adapters) of the ports
defined in the domain layer. This is where the database
engine and table definitions live.
"""
