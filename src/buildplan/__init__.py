"""Registry of resources and projects with flattened build summaries."""
