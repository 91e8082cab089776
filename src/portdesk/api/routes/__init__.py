"""Route group exports."""

from . import cargo, health, ports, reports, vessels

__all__ = ["cargo", "health", "ports", "reports", "vessels"]
