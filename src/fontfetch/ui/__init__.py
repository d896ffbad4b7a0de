"""User interfaces for fontfetch."""
