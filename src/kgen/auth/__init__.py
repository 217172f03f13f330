"""
kgen.auth

Client authorization package.

Responsibilities:
- Resolve the caller's source IP to hostnames.
- Decide whether the caller may receive a join command.
"""

# Package marker.


# --- Module Notes -----------------------------------------------------------
# Authorization here is network-identity based; there are no bearer tokens.
