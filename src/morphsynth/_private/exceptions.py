class ResourceUnavailableError(IOError):
    """A dictionary or tag list could not be read."""
    def __init__(self, path, reason=None):
        self.path = path
        self.reason = reason
        message = f"Resource unavailable: {path}"
        if reason is not None:
            message += f" ({reason})"
        super().__init__(message)


class TagPatternError(ValueError):
    """A tag pattern does not compile to a regular expression."""
    def __init__(self, pattern, message):
        self.pattern = pattern
        super().__init__(f"Invalid tag pattern {pattern!r}: {message}")
