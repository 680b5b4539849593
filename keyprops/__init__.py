"""Top-level package for keyprops.

keyprops loads `key = value` property files into a typed store validated
against a declared key schema, with multi-line values and recursive
`${NAME}` / `$NAME` substitution. The main entry point is `load`.
"""

from loguru import logger

from .errors import (
    ConfigError,
    ConfigFileUnavailable,
    CyclicReference,
    EmptySchema,
    InvalidConfigValue,
    MalformedLine,
    MissingMandatoryKey,
    SchemaFileInvalid,
    UnknownKey,
)
from .keys import KeyDescriptor, KeyRegistry
from .loader import PropertiesLoader, load
from .parser import LineParser
from .schema import load_key_schema
from .store import PropertyStore
from .substitution import SubstitutionEngine

logger.disable("keyprops")

__all__ = [
    "ConfigError",
    "ConfigFileUnavailable",
    "CyclicReference",
    "EmptySchema",
    "InvalidConfigValue",
    "KeyDescriptor",
    "KeyRegistry",
    "LineParser",
    "MalformedLine",
    "MissingMandatoryKey",
    "PropertiesLoader",
    "PropertyStore",
    "SchemaFileInvalid",
    "SubstitutionEngine",
    "UnknownKey",
    "__version__",
    "load",
    "load_key_schema",
]

__version__ = "0.1.0"
