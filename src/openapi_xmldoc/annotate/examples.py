"""Example text from documentation -> JSON value."""

import json
from typing import Any

from openapi_xmldoc.errors import MalformedExampleError


def coerce_example(raw: str, is_string: bool) -> Any:
    """Parse an example literal the way the target schema expects it.

    String schemas take the text verbatim, so it is quoted first; the bare
    token ``null`` stays a JSON null. Other schemas parse the text as JSON.
    """
    example_json = f'"{raw}"' if is_string and raw != "null" else raw
    try:
        return json.loads(example_json)
    except json.JSONDecodeError as e:
        raise MalformedExampleError(raw, e.msg) from e
