"""Infrastructure Layer: database lifecycle and logging setup."""
