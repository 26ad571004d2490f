"""Shared data types for the Solr command layer."""
