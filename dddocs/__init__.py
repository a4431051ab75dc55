"""Digital Design Dictionary documentation site configuration."""
