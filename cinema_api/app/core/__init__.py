"""Configuration, logging, storage and identifier helpers."""
