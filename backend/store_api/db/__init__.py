"""Database package - declarative Base shared by the ORM models."""
