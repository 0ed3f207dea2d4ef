"""Top level forth_lang exceptions"""


class ForthError(Exception):
    """Base for all forth_lang errors"""


class UserResolvableError(ForthError):
    """An error which the user can probably solve"""

    def __init__(self, msg, suggested_fix):
        super().__init__(msg)
        self.msg = msg
        self.suggested_fix = suggested_fix

    def __str__(self):
        if type(self) == UserResolvableError:
            text = self.msg
        else:
            text = f"{self.__doc__}: {self.msg}"
        if self.suggested_fix:
            text += f"\n\n{self.suggested_fix}"
        return text


class UnexpectedError(ForthError):
    """An error which is unexpected and with no obvious solution"""

    def __init__(self, msg):
        super().__init__(msg)
        self.msg = msg

    def __str__(self):
        if type(self) == UnexpectedError:
            return self.msg
        else:
            return f"{self.__doc__}:\n{self.msg}"
