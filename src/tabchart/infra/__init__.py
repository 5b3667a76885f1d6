"""Infrastructure: logging, settings and input streams."""
