"""Storage backend specifications.

This package parses local paths, HTTP(S) URLs and S3 URIs into typed
entries. It never opens files or network connections.
"""
