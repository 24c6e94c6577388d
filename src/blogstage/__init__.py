"""Blogstage - a minimal personal blog with sanitized markdown posts."""
