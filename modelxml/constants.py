from typing import ClassVar


class Defaults:
    PREAMBLE = True
    CONFIG_FILE = "modelxml.toml"
    ID_PROPERTY = "id"
    PROPERTY_TYPE = "String"


class Namespaces:
    XSI_PREFIX = "xsi"
    XSI_URI = "http://www.w3.org/2001/XMLSchema-instance"
    XML_PREFIX = "xml"
    XML_URI = "http://www.w3.org/XML/1998/namespace"
    XMLNS = "xmlns"


class Primitives:
    STRING = "String"
    BOOLEAN = "Boolean"
    INTEGER = "Integer"
    REAL = "Real"
    ALL: ClassVar[frozenset[str]] = frozenset({"String", "Boolean", "Integer", "Real"})


class Markup:
    DECLARATION = '<?xml version="1.0" encoding="UTF-8"?>'
    CDATA_START = "<![CDATA["
    CDATA_END = "]]>"
    TYPE_ATTRIBUTE = "xsi:type"


class EnvVars:
    PREAMBLE = "MODELXML_PREAMBLE"


class LogLevels:
    NORMAL = 0
    VERBOSE = 1
    DEBUG = 2
