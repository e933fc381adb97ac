class InvalidAddress(ValueError):
    """
    Raised when a string is not a valid IPv4 or IPv6 address
    """

    code = 'INVALID_IP'

    def __init__(self, message, address=None):
        super().__init__(message)
        self.message = message
        self.address = address


class ExpansionError(RuntimeError):
    """
    Raised when IPv6 expansion is handed a string that never passed validation
    """
