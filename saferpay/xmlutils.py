from xml.dom.minidom import parseString
from xml.parsers.expat import ExpatError
from urllib.parse import urlencode

from saferpay.exceptions import MalformedResponseError


def encode(fields):
    """
    Form-urlencode a record or mapping, skipping absent fields
    """
    if hasattr(fields, 'data'):
        fields = fields.data
    return urlencode([(k, v) for k, v in fields.items() if v is not None])


def decode(xml_str):
    """
    Return the attributes of a single-element XML fragment as a dict.  Any
    text before the first tag or after the last one is ignored.
    """
    if xml_str is None or not xml_str.strip():
        raise MalformedResponseError(xml_str, "empty response")
    start, end = xml_str.find('<'), xml_str.rfind('>')
    if start == -1 or end < start:
        raise MalformedResponseError(xml_str, "no element")
    try:
        doc = parseString(xml_str[start:end + 1])
    except ExpatError as e:
        raise MalformedResponseError(xml_str, str(e))
    ele = doc.documentElement
    if ele is None or not ele.attributes.length:
        raise MalformedResponseError(xml_str, "no attributes")
    return dict(ele.attributes.items())
