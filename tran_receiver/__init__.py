"""
tran-receiver: terminal progress display for an inbound file transfer.
"""

__version__ = "0.3.0"
