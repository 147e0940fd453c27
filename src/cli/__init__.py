"""Command line interface for rulefilter."""
