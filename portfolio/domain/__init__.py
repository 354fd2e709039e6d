"""Entity schemas, the collection registry and ordering rules."""
