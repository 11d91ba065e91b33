"""HTTP hosting surface for the record store."""
