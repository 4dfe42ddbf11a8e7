"""
Service layer.

Each service encapsulates the business rules for one entity and talks
to storage only through a ``StorageGateway`` passed in at construction.
"""
