"""Configuration loading, path policy, and derived runtime settings."""
