"""
kgen.issuer

Token issuer package.

Responsibilities:
- Define the boundary for producing cluster join commands.
- Provide the kubeadm-backed implementation.
"""

# Package marker.


# --- Module Notes -----------------------------------------------------------
# The join service depends on this boundary, never on kubeadm directly.
