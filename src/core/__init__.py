"""Shared configuration, errors, logging, and result types."""
