## Copyright © 2025, Alex J. Champandard.  Licensed under AGPLv3; see LICENSE! ⚘

import lark


class CakeArgsError(Exception):
    def __init__(self, message: str = "", *, argument=None):
        """Base class for all errors raised while interpreting launcher arguments."""
        super().__init__(message)
        self.argument: str = argument

class CakeInputError(CakeArgsError, TypeError):
    pass


class CakeUsageError(CakeArgsError, ValueError):
    """Recorded on the options instead of raised; the invocation is invalid but recoverable."""
    pass

class CakeDuplicateArgumentError(CakeUsageError):
    pass

class CakeMultipleScriptsError(CakeUsageError):
    pass

class CakeVerbosityError(CakeUsageError):
    def __init__(self, message: str = "", *, argument=None, value=None):
        super().__init__(message, argument=argument)
        self.value = value


class CakeBooleanError(CakeArgsError, ValueError):
    def __init__(self, message: str = "", *, argument=None, value=None):
        super().__init__(message, argument=argument)
        self.value = value


class CakeOptionSyntaxError(CakeArgsError, lark.exceptions.ParseError):
    def __init__(self, message, *, argument=None, column=None):
        super().__init__(message, argument=argument)
        self.column = column
