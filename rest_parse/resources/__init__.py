"""Per-resource convenience methods; each formats a path and delegates to the client."""
