"""
Standardized Error Handling for Pairing Method

The scoring core never raises for bad attribute values. Errors here belong to
the data layer and the dish lookup, and carry user-facing plain-text messages.
"""

import logging

logger = logging.getLogger(__name__)

# Shown when a failure carries no message of its own
DEFAULT_ERROR_MESSAGE = "Could not load pairing data. Please try again."


class PairingError(Exception):
    """Base exception for Pairing Method."""
    pass


class DataLoadError(PairingError):
    """A dataset file could not be read or parsed."""
    pass


class DataValidationError(PairingError):
    """A dataset was read but has the wrong shape."""
    pass


class DishSelectionError(PairingError):
    """No dish was selected."""
    pass


class DishNotFoundError(PairingError):
    """The selected dish isn't in the dataset."""
    pass


def user_message(error: Exception) -> str:
    """
    Plain-text message to show for an error.

    Args:
        error: Exception that occurred

    Returns:
        The error's own message, or DEFAULT_ERROR_MESSAGE when it has none
    """
    message = str(error).strip()
    if not message:
        logger.error(f"{type(error).__name__} raised without a message")
        return DEFAULT_ERROR_MESSAGE
    return message


# Export key functions and classes
__all__ = [
    'PairingError',
    'DataLoadError',
    'DataValidationError',
    'DishSelectionError',
    'DishNotFoundError',
    'DEFAULT_ERROR_MESSAGE',
    'user_message'
]
