"""Domain layer - Ports consumed by faultlog.

This layer holds the protocols (ports) that host applications implement:
the logger capability and the storage boundary. It has NO dependencies on
infrastructure; it is pure Python typing.

Structure:
- protocols/: Structural interfaces (PEP 544)
"""
