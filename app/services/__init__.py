"""Service layer: blog queries, blog mutations and search filter building."""
