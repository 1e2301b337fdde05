"""Domain layer: requirement keywords, template catalog and error hierarchy."""
