"""Applications built on the core matcher: model loading and the CLI."""
