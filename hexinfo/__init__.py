"""Terminal system information dashboard with a hex-dump backdrop."""

__version__ = "0.1.0"