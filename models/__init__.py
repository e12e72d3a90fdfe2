"""
Models package
Immutable value types shared by services and routes
"""

from .address import AddressCandidates
from .geo import GeoRecord

__all__ = ['AddressCandidates', 'GeoRecord']
