"""AstroBookings backend: rockets, launches and customers."""

__version__ = "1.0.0"
