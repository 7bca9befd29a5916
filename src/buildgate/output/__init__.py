"""Output layer: Rich console, result formatting, and failure presentation."""
