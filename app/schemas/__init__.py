"""
Schemas module - pydantic models for API contracts and stored documents.
"""
