"""Command line interface for obscurestring."""
