"""Infrastructure adapters - logging and HTTP session construction."""
