"""Command line interface for multichainrpc."""
