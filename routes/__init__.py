"""
Routes package
Flask blueprint routes
"""

from .ip import ip_bp

__all__ = ['ip_bp']
