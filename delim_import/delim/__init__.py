"""Delimited text ingestion: encoding, delimiter, tokenizer, headers, types."""
