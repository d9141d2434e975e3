class EmptyQueue(IndexError):
    """Raised by ``extract`` and ``peek`` when the queue holds no items."""
