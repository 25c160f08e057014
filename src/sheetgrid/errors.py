"""Faults raised by the table engine."""


class TableContractError(Exception):
    """A table operation was invoked with arguments outside of its contract.

    This signals a bug in the caller, like asking for a row
    that doesn't exist, and not a condition of the data.
    Lookups that simply find nothing return ``-1`` instead.
    """


def require(condition: bool, message: str) -> None:
    """Raise :class:`TableContractError` with ``message`` unless ``condition`` holds."""
    if not condition:
        raise TableContractError(message)
