"""Parts for an M17-only hotspot: protocol constants, frame layouts, queues, timers and modem ports."""

__version__ = "0.1.0"