"""Compute backends for the QR eigenvalue iteration."""

from qreigen.eigen.backends.cpu import CPUQREigenBackend

__all__ = ["CPUQREigenBackend"]
