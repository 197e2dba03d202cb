"""
Service layer abstraction.

Each service encapsulates business logic for a domain and is built
explicitly from a ``ZooStore``.  Services return domain entities; the
API handlers turn them into schemas.  By isolating logic here you can
swap the in-memory repositories for a database without changing the
API handlers.
"""
