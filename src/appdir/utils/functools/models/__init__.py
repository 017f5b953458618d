from .option import NONE, Option, Some, SomeNone, UnwrapNoneError, as_option, is_none, is_some, option
from .result import Err, Ok, OkErr, Result, UnwrapError, is_err, is_ok

__all__ = [
    "NONE",
    "Err",
    "Ok",
    "OkErr",
    "Option",
    "Result",
    "Some",
    "SomeNone",
    "UnwrapError",
    "UnwrapNoneError",
    "as_option",
    "is_err",
    "is_none",
    "is_ok",
    "is_some",
    "option",
]
