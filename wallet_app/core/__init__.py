"""Core configuration, crypto and logging helpers."""
