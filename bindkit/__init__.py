"""Control-binding runtime for externally provided render hosts."""
