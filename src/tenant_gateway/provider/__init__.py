"""
tenant_gateway.provider

Key-custody provider boundary.

Responsibilities:
- Define the provider interface the gateway depends on (`TenantProvider`).
- Provide the Turnkey HTTP implementation and its request stamper.
"""

# Package marker.


# --- Module Notes -----------------------------------------------------------
# The service layer should depend on `provider.base` only; HTTP details stay in `provider.turnkey`.
