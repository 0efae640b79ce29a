"""Core building blocks: result pipeline, failure reasons, sizes, paths and settings."""
