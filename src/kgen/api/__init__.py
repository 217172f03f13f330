"""
kgen.api

API package for the join-command service.

Responsibilities:
- FastAPI app factory and router modules.
- API-layer dependency wiring.
"""

# Package marker.


# --- Module Notes -----------------------------------------------------------
# The API layer should remain thin: authorization + delegation to services.
