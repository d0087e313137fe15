"""Text transforms built on the UTF-8 codec."""
