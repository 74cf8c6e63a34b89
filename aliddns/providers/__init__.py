"""Provider implementations for aliddns."""
