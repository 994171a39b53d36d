"""Graph storage and edge-list ingestion."""
