"""Key schemas shared by unit and integration tests."""

from __future__ import annotations

from enum import Enum

from keyprops.keys import KeyDescriptor


class SimpleKeys(Enum):
    """Plain enum schema: every member is an optional key named after the member."""

    HOME = "home"
    BIN_DIR = "bin"
    DUMP_FILE = "dump"
    CONF_DIR = "conf"
    DESCRIPTION = "description"


class MandatoryKeys(Enum):
    """Enum schema with one mandatory key absent from `simple.properties`."""

    HOME = KeyDescriptor("HOME", mandatory=True)
    CONF_DIR = KeyDescriptor("CONF_DIR", mandatory=True)


class DottedKeys(Enum):
    """Enum schema carrying explicit descriptors with dotted file-level names."""

    NO_VAL_YET = KeyDescriptor("my.not.yet", default_value="SomethingInMy:${my.home}")
    HOME = KeyDescriptor("my.home", mandatory=True, default_value="/home")
    CONF = KeyDescriptor("my.conf", mandatory=True, default_value="/home/conf")
    LOGS = KeyDescriptor("my.logs", default_value="/tmp")
    UTIL_HOME = KeyDescriptor("my.util", default_value="${my.home}/utils")
    PRIVILEGE_LEVEL = KeyDescriptor("my.privilege", default_value="10")


class TypedKeys(Enum):
    """Keys of `typed.properties`."""

    INTS_VALID = "ints"
    INTS_VALID_WITH_DIFFERENT_DELIMITER = "ints-colon"
    INTS_VALID_WITH_SPECIAL_CHARACTER_DELIMITER = "ints-pipe"
    INTS_INVALID = "ints-invalid"
    FLOATS_VALID = "floats"
    STRINGS = "strings"
    CHAR_VAL = "char"
    BYTE_VAL = "byte"
    BOOLEAN_VAL = "boolean"
    DOUBLE_VAL = "double"
    LONG_VAL = "long"
