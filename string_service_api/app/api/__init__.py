"""
HTTP wiring for the string operations.

``endpoints`` turns service methods into endpoints, ``codecs`` holds
the decode and encode functions for the wire format and ``router``
mounts everything on an ``APIRouter``.
"""
