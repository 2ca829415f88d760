"""Version parsing, encoding and installed package lookup."""
