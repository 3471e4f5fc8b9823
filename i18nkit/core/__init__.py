"""Core configuration, logging and synchronization primitives."""
