"""dc-health — diagnostic task runner for Samba AD domain controllers."""

PRODUCT_NAME = "dc-health"
__version__ = "1.0.0"
