"""
tenant_gateway.services

Service-layer package.

Responsibilities:
- Validate inputs and sequence provider calls for each gateway operation.
"""

# Package marker.


# --- Module Notes -----------------------------------------------------------
# Services should be pure Python and easily testable with fake providers.
