# hexcomb/errors.py


class InvalidConfiguration(ValueError):
    """
    Caller contract violation that cannot be defaulted away
    (non-positive column count, negative badge count, ...).
    """

    def __init__(self, option: str, value, reason: str = ""):
        self.option = option
        self.value = value
        msg = f"invalid {option}={value!r}"
        if reason:
            msg += f": {reason}"
        super().__init__(msg)
