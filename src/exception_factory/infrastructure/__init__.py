"""Infrastructure: settings and structured logging."""
