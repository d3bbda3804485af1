
# Written by Eric J. Whitney, April 2023.


# ======================================================================

class QuantityError(ValueError):
    """
    Base exception raised when a quantity or unit operation cannot be
    carried out.  Additional information (optional) is included to
    allow the reason for the failure to be determined.

    Notes
    -----
    Subclasses may also have additional attributes depending on the
    specific failure.
    """

    def __init__(self, *args, details: str = None, **kwargs):
        """
        Parameters
        ----------
        args :
            Passed to `ValueError`.
        details : str, default = None
            Additional text can be included relating to the specific
            type of failure.
        kwargs :
            Additional attributes can be added to the object using
            keyword arguments.
        """
        super().__init__(*args)
        self.details = details
        for k, v in kwargs.items():
            setattr(self, k, v)

    def __str__(self):
        """Add additional details below the main failure notice."""
        error_str = super().__str__()
        for k, v in self.__dict__.items():
            if v is not None:
                error_str += f"\n{k} -> {v}"
        return error_str


# ----------------------------------------------------------------------

class InvalidValue(QuantityError):
    """
    Raised when a value is NaN or infinite.  The offending value is
    available as the `value` attribute.
    """

    def __init__(self, value, *args, **kwargs):
        if not args:
            args = (f"Invalid value: {value}. Value must be a finite "
                    f"number.",)
        super().__init__(*args, value=value, **kwargs)


class UnsupportedOperation(QuantityError):
    """
    Raised when an operation is requested that the unit category does
    not allow, e.g. adding two temperatures.  `operation` gives the name
    of the operation and `unit` the unit that refused it.
    """

    def __init__(self, operation: str, *args, unit=None, **kwargs):
        if not args:
            args = (f"Operation '{operation}' is not supported.",)
        super().__init__(*args, operation=operation, unit=unit, **kwargs)


class DivisionByZero(QuantityError, ZeroDivisionError):
    """Raised when the divisor of a quantity division is zero."""
    pass


class NullArgument(QuantityError, TypeError):
    """
    Raised when a required quantity argument is ``None``.  The name of
    the argument is given by `argument`.
    """

    def __init__(self, argument: str, *args, **kwargs):
        if not args:
            args = (f"'{argument}' cannot be None.",)
        super().__init__(*args, argument=argument, **kwargs)

# ======================================================================
