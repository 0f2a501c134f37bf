"""Exception hierarchy for openapi-xmldoc.

Missing documentation is never an error; these cover authoring mistakes
and unreadable inputs only.
"""


class XmlDocError(Exception):
    """Base exception for all openapi-xmldoc errors."""


class DocumentationSourceError(XmlDocError):
    """Raised when an XML documentation file cannot be parsed."""


class MalformedExampleError(XmlDocError, ValueError):
    """Raised when an <example> value is not valid JSON after coercion."""

    def __init__(self, raw: str, reason: str):
        self.raw = raw
        self.reason = reason
        super().__init__(f"Malformed example {raw!r}: {reason}")
