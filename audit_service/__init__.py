"""
Audit Service - audit log store and security monitoring.
"""

__version__ = "0.1.0"
