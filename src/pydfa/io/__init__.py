"""Reading transition descriptions."""
