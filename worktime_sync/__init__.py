"""Work-hour sync tool for HR time-tracking APIs."""

__version__ = "1.0.0"
