"""
edge-headers - _headers file parser and CSP header generator
"""

__version__ = "0.1.0"

from edgeheaders.headers import build_headers, parse_headers, serialize_headers

__all__ = ['build_headers', 'parse_headers', 'serialize_headers']
