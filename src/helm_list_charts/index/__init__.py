"""Retrieval and parsing of repository ``index.yaml`` documents."""
