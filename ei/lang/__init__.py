"""Error reporting, sessions and the interactive shell."""
