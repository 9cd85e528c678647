"""Exception hierarchy for the wallet test harness."""


class HarnessError(Exception):
    """Base class for harness errors."""


class CaseRegistrationError(HarnessError):
    """Raised when a test case is declared with invalid arguments."""


class MissingParameterError(HarnessError):
    """Raised when a case reads a suite parameter that was not supplied."""


class OperationError(HarnessError):
    """Raised by a case operation when its own assertion does not hold."""


class SessionOperationError(HarnessError):
    """Raised when a session client call is rejected by the wallet."""
