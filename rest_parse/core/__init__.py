"""Core building blocks shared by the client and every resource module."""
