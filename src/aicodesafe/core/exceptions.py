"""aicodesafe custom exceptions."""

from __future__ import annotations


class AICodeSafeError(Exception):
    """Base class for aicodesafe errors."""


class PatternLibraryError(AICodeSafeError):
    """Raised when a detector rule cannot be compiled or is malformed."""

    def __init__(self, message: str, rule: str = None):
        self.rule = rule
        super().__init__(message)

    def __str__(self):
        msg = super().__str__()
        if self.rule:
            msg += f" (rule: {self.rule})"
        return msg


class AICodeSafeConfigError(AICodeSafeError):
    """Raised when configuration is missing or invalid."""

    def __init__(self, message: str, config_path: str = None, section: str = None):
        self.config_path = config_path
        self.section = section
        super().__init__(message)

    def __str__(self):
        msg = super().__str__()
        if self.config_path:
            msg += f" (config: {self.config_path})"
        if self.section:
            msg += f" (section: {self.section})"
        return msg


class EnvelopeError(AICodeSafeError):
    """Raised when a hook payload cannot be parsed into a JSON object."""
