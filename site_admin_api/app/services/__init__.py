"""
Service layer.

Each service encapsulates the operations of one resource kind.  The
data store is passed in explicitly by the caller (endpoints obtain it
through a dependency), so no service holds state between requests.
"""
