"""
kgen.services

Service-layer package.

Responsibilities:
- Turn issuer output into the command returned to the caller.
"""

# Package marker.


# --- Module Notes -----------------------------------------------------------
# Services should be pure Python and easily testable with fake issuers.
