"""Booking pricing and refund engine for the pet fostering marketplace."""

__version__ = "0.1.0"
