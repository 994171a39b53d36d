"""Sampled shortest-path statistics for large directed graphs."""
