"""Core building blocks for neo-fetch: exceptions shared by every feature."""
