"""Core auth and error primitives."""
