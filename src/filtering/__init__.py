"""Rule-based record filtering engine.

This package compiles two-level AND/OR rule sets into typed evaluators.
It filters and paginates record lists in place for the SDK and CLI.
"""
