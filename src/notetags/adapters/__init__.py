"""Storage and frontmatter adapters."""
