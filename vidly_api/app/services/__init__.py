"""
Service layer.

Each service encapsulates the business logic of one domain.  Services
receive the database (or the stores they need) as an argument, so API
handlers decide where data lives and tests can hand in their own.
"""
