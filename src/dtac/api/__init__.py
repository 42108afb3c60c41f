"""HTTP API exposing loaded game constants."""
