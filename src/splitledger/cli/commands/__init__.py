"""CLI commands for splitledger."""
