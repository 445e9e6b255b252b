"""SDK core: domain, validation, configuration and services."""
