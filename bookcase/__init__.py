"""Bookcase: a personal library catalog with a REST API and audit trail"""

__version__ = "0.1.0"
