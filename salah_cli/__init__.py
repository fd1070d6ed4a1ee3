"""Islamic prayer times on the command line."""
