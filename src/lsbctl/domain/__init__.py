"""Request model and process bootstrap."""
