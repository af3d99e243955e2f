"""Static template payloads for generated packages."""
