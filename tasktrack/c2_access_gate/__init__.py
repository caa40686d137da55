"""Request authentication for tasktrack."""

from tasktrack.c2_access_gate.access_gate import AccessGate

__all__ = ["AccessGate"]
