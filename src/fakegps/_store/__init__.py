"""Registry store backends."""
