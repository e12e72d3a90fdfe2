"""
Utils package
Address parsing, normalization and locking helpers
"""

from .validators import parse_ip
from .network import normalize, split_host_port, join_host_port
from .rwlock import ReadWriteLock

__all__ = [
    'parse_ip',
    'normalize',
    'split_host_port',
    'join_host_port',
    'ReadWriteLock'
]
