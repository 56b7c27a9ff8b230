"""Source catalog storage."""
