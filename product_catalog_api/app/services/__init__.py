"""
Service layer abstraction.

The store owns the product records, the query helpers and validators
are plain functions, and ``ProductService`` combines them for the API
handlers.  Handlers never touch the store directly.
"""
