"""Environment configuration and logging setup."""
