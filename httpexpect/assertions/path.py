"""
JSONPath evaluation for value wrappers.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from jsonpath_ng import parse as parse_jsonpath
from jsonpath_ng.exceptions import JsonPathParserError

if TYPE_CHECKING:
    from .chain import Chain
    from .value import Value


def evaluate_path(chain: Chain, data: Any, path: str) -> Value:
    """
    Evaluate a JSONPath expression and wrap the result in a Value.

    A single match yields that value; several matches yield an array of
    them. An invalid expression or no match fails ``chain`` and yields an
    invalid Value.
    """
    from .value import Value

    try:
        jsonpath_expr = parse_jsonpath(path)
    except JsonPathParserError as e:
        chain.fail("invalid JSONPath expression", path=path, details={"error": str(e)})
        return Value.invalid(chain.clone())
    except Exception as e:
        chain.fail(
            "failed to parse JSONPath",
            path=path,
            details={"error": f"{type(e).__name__}: {e}"},
        )
        return Value.invalid(chain.clone())

    try:
        matches = jsonpath_expr.find(data)
    except Exception as e:
        chain.fail(
            "failed to evaluate JSONPath",
            path=path,
            details={"error": f"{type(e).__name__}: {e}"},
        )
        return Value.invalid(chain.clone())

    if not matches:
        chain.fail("path does not exist", path=path, expected="path to exist", actual="no matches found")
        return Value.invalid(chain.clone())

    if len(matches) == 1:
        return Value(chain.clone(), matches[0].value)
    return Value(chain.clone(), [m.value for m in matches])
