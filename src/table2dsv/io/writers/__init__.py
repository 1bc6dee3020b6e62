"""Output file writers."""
