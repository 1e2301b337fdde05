"""Application layer: capability registry, ExceptionBuilder and factory shortcuts."""
