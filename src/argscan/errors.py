## Copyright © 2025, Alex J. Champandard.  Licensed under AGPLv3; see LICENSE! ⚘


class CliError(Exception):
    def __init__(self, message: str = "", *, token=None):
        """Base class for all argscan-raised errors."""
        super().__init__(message)
        self.token: str = token

class CliDeclarationError(CliError, ValueError):
    """Malformed declaration, raised while building the interface and never while scanning."""
    def __init__(self, message, *, manual=None, part=None):
        super().__init__(message, token=part)
        self.manual = manual
        self.part = part

class CliUnknownTokenError(CliError, LookupError):
    def __init__(self, message, *, token=None, position=None):
        super().__init__(message, token=token)
        self.position = position
