"""
XML to JSON-compatible object conversion

Repeated sibling elements become lists, elements that occur once become
dicts, and text-only elements become strings. Attributes are kept under
``@name`` keys.
"""

from typing import Any, Dict
from xml.parsers.expat import ExpatError

import xmltodict

from .exceptions import ConversionError, wrap_exception


def _empty_to_string(path, key, value):
    """Report empty elements as "" rather than None"""
    if value is None:
        return key, ""
    return key, value


def xml_to_object(xml_text: str) -> Dict[str, Any]:
    """
    Convert an XML document into nested dicts, lists and strings

    Args:
        xml_text: Full XML document text

    Returns:
        Dict keyed by the document's root element name

    Raises:
        ConversionError: If the text is not well-formed XML
    """
    try:
        parsed = xmltodict.parse(xml_text, postprocessor=_empty_to_string)
    except ExpatError as e:
        raise wrap_exception(
            e,
            ConversionError,
            "Remote payload is not well-formed XML",
            details={"length": len(xml_text)},
        ) from e

    return parsed
