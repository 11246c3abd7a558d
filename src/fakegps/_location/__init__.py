"""Platform location service adapters."""
