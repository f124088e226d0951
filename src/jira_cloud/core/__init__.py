"""Core: configuration, domain models and contracts shared by adapters and CLI."""
