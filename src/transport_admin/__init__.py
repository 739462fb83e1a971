"""Admin dashboard for transport, ICT and store requests."""

__version__ = "0.1.0"
