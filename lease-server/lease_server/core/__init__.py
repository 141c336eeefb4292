"""Core configuration and wiring."""
