"""Configuration, logging, database bootstrap and error kinds."""
