"""Errors raised for bad keypad layouts, buttons and codes."""


class KeypadChainError(ValueError):
    pass


class InvalidButtonError(KeypadChainError):
    """A symbol that is not a button on the keypad being used."""

    def __init__(self, button, keypad_name="keypad"):
        self.button = button
        self.keypad_name = keypad_name
        super().__init__("Unknown button %r on %s" % (button, keypad_name))


class MalformedCodeError(KeypadChainError):
    pass


class LayoutError(KeypadChainError):
    pass
