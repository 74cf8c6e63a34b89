"""CLI sub-commands for aliddns."""
