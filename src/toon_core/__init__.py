"""TOON Core — parser, query layer and JSON emitter for TOON text."""

from .builder import (
    add_property,
    list_push,
    new_bool,
    new_double,
    new_int,
    new_list,
    new_null,
    new_object,
    new_string,
    new_table,
)
from .cli import TOONRepl
from .document import Document
from .emitter import dump_json, to_json, to_python
from .errors import DepthLimitError, Diagnostic, Severity, TOONError
from .getter import (
    as_bool,
    as_double,
    as_int,
    as_string,
    at,
    get,
    is_bool,
    is_double,
    is_int,
    is_list,
    is_null,
    is_object,
    is_string,
    is_table,
    length,
)
from .options import ParseOptions
from .reader import Parser, parse, parse_document
from .release import release
from .scalars import atom_to_value
from .values import (
    Absent,
    Value,
    VBool,
    VDouble,
    VInt,
    VList,
    VNull,
    VObject,
    VString,
    VTable,
    _Absent,
)

__all__ = [
    "parse",
    "parse_document",
    "Parser",
    "ParseOptions",
    "Document",
    "TOONRepl",
    "Absent",
    "Value",
    "VBool",
    "VDouble",
    "VInt",
    "VList",
    "VNull",
    "VObject",
    "VString",
    "VTable",
    "atom_to_value",
    "get",
    "length",
    "at",
    "as_bool",
    "as_double",
    "as_int",
    "as_string",
    "is_bool",
    "is_double",
    "is_int",
    "is_list",
    "is_null",
    "is_object",
    "is_string",
    "is_table",
    "new_object",
    "new_string",
    "new_int",
    "new_double",
    "new_bool",
    "new_null",
    "new_list",
    "new_table",
    "list_push",
    "add_property",
    "to_json",
    "dump_json",
    "to_python",
    "release",
    "TOONError",
    "DepthLimitError",
    "Diagnostic",
    "Severity",
]
