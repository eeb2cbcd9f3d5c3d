"""Read-side adapters implementing application ports."""
