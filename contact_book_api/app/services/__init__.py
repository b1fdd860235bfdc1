"""
Service layer abstraction.

Services encapsulate storage access for a domain so that API handlers
only deal with validated schemas and typed errors.
"""
