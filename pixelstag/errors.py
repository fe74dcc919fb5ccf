"""Exception classes for PixelStag."""


class ContractViolation(AssertionError):
    """Raised when a caller breaks a precondition of an operation.

    Contract violations are programming errors (non-positive sizes, unsupported
    channel counts, mismatched color arities) and are never handled inside the
    library.
    """

    pass


def require(condition: bool, message: str, *args) -> None:
    """Raise :class:`ContractViolation` if ``condition`` does not hold.

    Unlike ``assert`` this check stays active when Python runs with ``-O``.

    :param condition: The precondition to verify
    :param message: Error message, optionally with ``%`` placeholders
    :param args: Values for the placeholders in ``message``
    """
    if not condition:
        raise ContractViolation(message % args if args else message)
