"""Client application wiring: i18n, notifications and dependency container."""
