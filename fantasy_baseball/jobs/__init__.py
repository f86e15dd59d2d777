"""Background jobs: MLB roster sync and its scheduler."""
