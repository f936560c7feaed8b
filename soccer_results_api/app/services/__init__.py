"""
Service layer abstraction.

Each service encapsulates business logic for a domain.  Services are
constructed with the store they use, so the backing storage can be
swapped without changing API handlers.
"""
