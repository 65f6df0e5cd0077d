"""doclinks - internal link checker for markdown documentation sites."""
