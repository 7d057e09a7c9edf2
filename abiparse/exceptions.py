class _BaseABIException(Exception):
    """
    Base abiparse exception class.

    This exception is not raised directly. Other exceptions inherit it in
    order to share message and hint formatting.
    """

    def __init__(self, message="Error Message not found.", *, hint=None):
        """
        Exception initializer.

        Arguments
        ---------
        message : str
            Error message to display with the exception.
        hint : str | Callable[[], str], optional
            Additional help shown after the message. May be a callable so
            that expensive hints are only computed when the message is
            formatted.
        """
        super().__init__(message)
        self._message = message
        self._hint = hint

    @property
    def hint(self):
        # some hints are expensive to compute, so we wait until the last
        # minute when the formatted message is actually requested to compute
        # them.
        if callable(self._hint):
            return self._hint()
        return self._hint

    @property
    def message(self):
        msg = self._message
        if self.hint:
            msg += f"\n\n  (hint: {self.hint})"
        return msg

    def __str__(self):
        return self.message


class ABIException(_BaseABIException):
    pass


class ParseError(ABIException):
    """A type string or structured ABI parameter could not be parsed."""


class InvalidName(ParseError):
    """A type string that matches no production of the type grammar."""

    def __init__(self, name, *, hint=None):
        self.name = name
        super().__init__(f"Invalid ABI type name: {name!r}", hint=hint)


class InvalidNumber(ParseError):
    """A width or array length that is not an unsigned decimal integer."""

    def __init__(self, value, type_name=None):
        self.value = value
        self.type_name = type_name
        msg = f"Invalid number {value!r}"
        if type_name is not None:
            msg += f" in ABI type {type_name!r}"
        super().__init__(msg, hint="expected an unsigned decimal integer")


class MissingField(ParseError):
    """A required field is absent from a structured parameter."""

    def __init__(self, field):
        self.field = field
        super().__init__(f"missing field `{field}`")


class DuplicateField(ParseError):
    """The same key appears more than once in a structured parameter."""

    def __init__(self, field):
        self.field = field
        super().__init__(f"duplicate field `{field}`")


class MissingTypeField(ParseError):
    """A tuple component descriptor has no `type`."""

    def __init__(self, message="Invalid tuple param type: component has no `type` field"):
        super().__init__(message)


class JSONError(ParseError):
    """Input JSON cannot be decoded, or does not have the expected shape."""

    def __init__(self, msg, lineno=None, col_offset=None):
        super().__init__(msg)
        self.lineno = lineno
        self.col_offset = col_offset


class InvalidFieldValue(ParseError):
    """A field of a structured parameter holds a value of the wrong JSON type."""

    def __init__(self, field, message):
        self.field = field
        super().__init__(f"invalid value for field `{field}`: {message}")


class UnexpectedField(ParseError):
    """A field that is not allowed for this parameter (strict mode only)."""

    def __init__(self, field, *, hint=None):
        self.field = field
        super().__init__(f"unexpected field `{field}`", hint=hint)


class NestingTooDeep(ParseError):
    """
    Type nesting exceeds the configured ceiling, or (with no ceiling set)
    is too deep for the interpreter to parse.
    """

    def __init__(self, max_depth=None, type_name=None):
        self.max_depth = max_depth
        if max_depth is None:
            msg = "ABI type nesting is too deep to parse"
            hint = "tuple nesting is limited by the interpreter recursion limit"
        else:
            msg = f"ABI type nesting exceeds the maximum depth of {max_depth}"
            hint = "raise or unset ABIPARSE_MAX_NESTING_DEPTH"
        if type_name is not None:
            msg += f": {type_name!r}"
        super().__init__(msg, hint=hint)


class ABIInternalException(_BaseABIException):
    """
    Base abiparse internal exception class.

    This exception is not raised directly, it is subclassed by other internal
    exceptions.

    Internal exceptions signal a programming error in the caller or in
    abiparse itself, not malformed input.
    """

    def __str__(self):
        return (
            f"{super().__str__()}\n\n"
            "This is an unhandled internal error. "
            "Please create an issue to notify the developers!"
        )


class InvalidABIType(ABIInternalException):
    """An internal routine constructed an invalid ABI type"""
