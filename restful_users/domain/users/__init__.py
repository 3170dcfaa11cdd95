"""
Domain model for the users bounded context.

Entities, the patchable-field registry, the age eligibility rule,
domain errors and the repository port.
"""
