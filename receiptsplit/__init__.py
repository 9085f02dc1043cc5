"""Receipt text parsing and bill splitting."""

__version__ = "0.1.0"
