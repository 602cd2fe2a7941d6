import xml.etree.ElementTree as ET
from enum import Enum

from pydantic import BaseModel, ConfigDict

XML_NAMESPACE = "urn:ietf:rfc:7807"

CONTENT_TYPE_PROBLEM_JSON = "application/problem+json"
CONTENT_TYPE_PROBLEM_XML = "application/problem+xml"

INTERNAL_SERVER_ERROR_TYPE = "https://www.rfc-editor.org/rfc/rfc7231#section-6.6.1"

JSON_HTML_ESCAPES = {
    "&": "\\u0026",
    "<": "\\u003c",
    ">": "\\u003e",
    "\u2028": "\\u2028",
    "\u2029": "\\u2029",
}


class ResponseFormat(str, Enum):
    JSON = "json"
    XML = "xml"

    @property
    def content_type(self) -> str:
        if self is ResponseFormat.XML:
            return CONTENT_TYPE_PROBLEM_XML
        return CONTENT_TYPE_PROBLEM_JSON


class ProblemDetails(BaseModel):
    """
    RFC 7807 Problem Details body.

    Field order is part of the wire format: both serializations emit
    type, title, status, detail, instance in that order.
    """

    model_config = ConfigDict(frozen=True)

    type: str
    title: str
    status: int
    detail: str = ""
    instance: str = ""

    @classmethod
    def new(
        cls, type: str, title: str, status: int, detail: str, instance: str
    ) -> "ProblemDetails":
        return cls(type=type, title=title, status=status, detail=detail, instance=instance)

    def to_json(self) -> str:
        """
        Compact JSON object terminated by a newline.

        `<`, `>`, `&` and the JS line separators are written as \\u escapes,
        the same bytes an HTML-safe streaming JSON encoder produces.
        """
        body = self.model_dump_json()
        for char, escaped in JSON_HTML_ESCAPES.items():
            body = body.replace(char, escaped)
        return body + "\n"

    def to_xml(self) -> str:
        """`<problem>` document in the RFC 7807 namespace, no trailing newline."""
        root = ET.Element("problem", xmlns=XML_NAMESPACE)
        for name, value in self.model_dump().items():
            ET.SubElement(root, name).text = str(value)
        return ET.tostring(root, encoding="unicode", short_empty_elements=False)

    def render(self, response_format: ResponseFormat) -> str:
        if response_format is ResponseFormat.XML:
            return self.to_xml()
        return self.to_json()
