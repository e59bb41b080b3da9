"""Host application for casekit modules."""

__version__ = "0.1.0"
