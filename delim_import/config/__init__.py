"""Import options configuration (YAML loader + schema validation)."""
