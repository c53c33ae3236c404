"""Services Layer: query engine and mutation actions over an injected session factory.

Invariants:
    - Services never create engines or read settings; callers inject the store handle
    - Every store failure leaves a service as a DataAccessError naming the operation
"""
