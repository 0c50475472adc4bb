from .commandline import CLOptions
from .convert import convert, register_converter
from .exceptions import (
    ArgumentIncorrectType,
    InvalidOptionFormatError,
    MissingArgumentException,
    OptionException,
    OptionExistsError,
    OptionNotExistsException,
    OptionParseException,
    OptionSpecException,
)
from .spec import Arity, OptionSpec, compile_long_spec, compile_short_spec, render_long_spec, render_short_spec
from .store import OptionName, ParsedOption
from .tokenizer import quote_arg, split_args, split_command

__version__ = "1.0.0"
