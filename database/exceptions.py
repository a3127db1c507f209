class DatabaseError(Exception):
    """Base for all persistence errors."""


class IntegrityError(DatabaseError):
    """Foreign key or check constraint violation while writing scores."""
