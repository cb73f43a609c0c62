from .option import Option, Some, NONE, some, none, from_nullable, some_when, none_when
from .result import Result, Ok, Err, ok, err, from_nullable as result_from_nullable
from .errors import MissingValueError, ArgumentError
from .sequence import OptionSequence
from .formats import NumberStyle, DateTimeStyle, Locale, INVARIANT
from .logger import ConsoleLogger
from .parse import ParseAdapter, ParseFailure
from . import parse
# optionpy.unsafe is not re-exported; import it explicitly where a raw value is needed.
