class DomainException(Exception):
    """Base exception for everything raised by deepround."""

    pass
