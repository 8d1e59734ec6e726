"""Session and identity helpers."""
