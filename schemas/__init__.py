"""
schemas package
---------------

Pydantic models for the records exchanged with the persistence/API layer
(`records`) and for the grouped and forecast outputs (`reports`).
"""
