"""Constants for model XML generation.

Namespace bindings that the writer may declare on its own, the XML
declaration line and the discriminator attribute name.
"""

from modelxml.constants import Markup, Namespaces

XSI_PREFIX = Namespaces.XSI_PREFIX
XSI_NS = Namespaces.XSI_URI
XML_PREFIX = Namespaces.XML_PREFIX
XML_NS = Namespaces.XML_URI
XMLNS = Namespaces.XMLNS

# Prefixes the writer can bind without a package declaring them.
BUILTIN_NAMESPACES = {XSI_PREFIX: XSI_NS}

XML_DECLARATION = Markup.DECLARATION
TYPE_ATTRIBUTE = Markup.TYPE_ATTRIBUTE
CDATA_START = Markup.CDATA_START
CDATA_END = Markup.CDATA_END
