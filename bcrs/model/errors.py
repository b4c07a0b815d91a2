# bcrs/model/errors.py
# error kinds raised by the field, polynomial, encoder and decoder layers
# callers can branch on the kind: bad parameters vs field domain vs
# uncorrectable data. every kind also derives from a builtin so plain
# `except ValueError` keeps working.


class RSError(Exception):
    pass


class ConfigurationError(RSError, ValueError):
    # bad call: ec_len 0, no data bytes, negative degree, mixed fields
    pass


class FieldError(RSError, ArithmeticError):
    # log(0), inverse(0), division by the zero polynomial
    pass


class DecodingFailure(RSError, ValueError):
    # received word cannot be corrected under the error model
    pass
