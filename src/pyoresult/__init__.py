from . import option, result
from ._core import Config, get_config
from .option import NONE, NoneOption, Option, OptionUnwrapError, Some
from .result import Err, Ok, Result, ResultUnwrapError

__all__ = [
    "NONE",
    "Config",
    "Err",
    "NoneOption",
    "Ok",
    "Option",
    "OptionUnwrapError",
    "Result",
    "ResultUnwrapError",
    "Some",
    "get_config",
    "option",
    "result",
]
