"""
Pydantic schema definitions for API payloads.

Each domain (events, participants, enrollments) defines its own
Pydantic models for request and response bodies.  Schemas are kept
apart from the domain models to decouple the API representation from
validation and persistence.
"""
