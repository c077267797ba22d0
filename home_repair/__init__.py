"""Home repair marketplace API."""
