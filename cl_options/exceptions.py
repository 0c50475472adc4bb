from typing import Any


class OptionException(Exception):
    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def __str__(self):
        return self.message

class OptionSpecException(OptionException):
    pass

class OptionParseException(OptionException):
    pass

class OptionExistsError(OptionSpecException):
    def __init__(self, option: str, old: Any, new: Any):
        super().__init__(f"Option ‘{option}’ already declared as {old}, cannot redeclare as {new}")
        self.option = option

class InvalidOptionFormatError(OptionSpecException):
    def __init__(self, format: str, reason: str):
        super().__init__(f"Invalid option format ‘{format}’: {reason}")
        self.format = format

class OptionNotExistsException(OptionParseException):
    def __init__(self, option: str):
        super().__init__(f"Option ‘{option}’ does not exist")
        self.option = option

class MissingArgumentException(OptionParseException):
    def __init__(self, option: str):
        super().__init__(f"Option ‘{option}’ is missing an argument")
        self.option = option

class ArgumentIncorrectType(OptionParseException):
    def __init__(self, arg: str, value_type: Any = None):
        if value_type is None:
            super().__init__(f"Argument ‘{arg}’ failed to parse")
        else:
            name = getattr(value_type, "__name__", repr(value_type))
            super().__init__(f"Argument ‘{arg}’ failed to parse as {name}")
        self.arg = arg
        self.value_type = value_type
