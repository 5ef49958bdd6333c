"""
Template expression parsing and JSONPath evaluation.

Handles evaluation of template strings with {expressions} and JSONPath
queries over plain card data.
"""

import re
from typing import Any, List, Match

from jsonpath_ng import parse as jsonpath_parse


class JSONPathEngine:
    """Evaluates JSONPath expressions against card data."""

    @staticmethod
    def evaluate(expression: str, data: Any) -> List[Any]:
        """
        Evaluate a JSONPath expression against data.

        Args:
            expression: JSONPath expression (e.g., "$.signatories[*]")
            data: Data to query

        Returns:
            List of matching values, in document order
        """
        jsonpath_expr = jsonpath_parse(expression)
        matches = jsonpath_expr.find(data)
        return [match.value for match in matches]


class ExpressionParser:
    """Parses and evaluates card template expressions."""

    # Pattern to match {expression} in template strings
    EXPR_PATTERN = re.compile(r'\{([^}]+)\}')

    def __init__(self, jsonpath_engine: JSONPathEngine):
        self.jsonpath = jsonpath_engine

    def evaluate_expression(self, expr: str, data: Any) -> Any:
        """
        Evaluate a single expression (content within {}).

        Args:
            expr: Expression string (e.g., "$.phrase" or "$.signatories[0]")
            data: Data context

        Returns:
            Evaluated value, "" when a path does not resolve
        """
        expr = expr.strip()

        if expr.startswith('$'):
            # Simple field path like $.name or $.closing_phrases.Thor
            if expr.startswith('$.') and '[' not in expr and '(' not in expr:
                path_parts = expr[2:].split('.')
                value = data
                for part in path_parts:
                    if isinstance(value, dict):
                        value = value.get(part, "")
                    else:
                        value = ""
                        break
                return value

            results = self.jsonpath.evaluate(expr, data)
            return results[0] if results else ""

        # Literal value
        return expr

    def evaluate_template_string(self, template: str, data: Any) -> str:
        """
        Evaluate a template string with embedded {expressions}.

        Substituted values are inserted verbatim and are not scanned again,
        so braces inside card text come through unchanged.

        Args:
            template: Template string (e.g., "{$.phrase}, {$.name}")
            data: Data context

        Returns:
            String with all expressions evaluated and substituted
        """
        def replace_expr(match: Match[str]) -> str:
            value = self.evaluate_expression(match.group(1), data)
            return str(value) if value is not None else ""

        return self.EXPR_PATTERN.sub(replace_expr, template)
