"""Application logging: labeled console output and JSON Lines error log."""
