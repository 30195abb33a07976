"""roleguard - role-based permission grants with pluggable evaluation."""

__version__ = "0.1.0"
