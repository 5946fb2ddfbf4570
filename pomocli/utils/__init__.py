"""Configuration, logging and file-schema helpers."""
