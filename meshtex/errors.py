"""Custom exceptions for texture coordinate and compositing operations"""


class MeshTexError(Exception):
    """Base exception for meshtex errors"""
    pass


class InvalidInputShapeError(MeshTexError, ValueError):
    """Vertex input violates a coordinate function's shape requirement"""
    pass


class UnsupportedModeError(MeshTexError, RuntimeError):
    """Dispatch reached a mode without an implementation (programming error)"""
    pass
