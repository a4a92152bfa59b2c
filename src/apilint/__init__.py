"""apilint — structural lint rules for declared API type schemas."""

__version__ = "0.3.0"
