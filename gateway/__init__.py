"""Remote booking API collaborators."""
