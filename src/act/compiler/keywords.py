# Copyright 2026 ACT Contributors
# SPDX-License-Identifier: Apache-2.0

"""Literal spellings of every symbol recognized by the ACT language."""

from types import MappingProxyType

# ###############
# Public Interface
# ###############

KEYWORDS: MappingProxyType[str, str] = MappingProxyType(
    {
        "additionOperator": "+",
        "subtractionOperator": "-",
        "multiplicationOperator": "*",
        "divisionOperator": "/",
        "remainderOperator": "%",
        "groupingOpeningTag": "(",
        "groupingClosingTag": ")",
        "singleLineComment": "#",
        "multiLineCommentOpeningTag": "<#",
        "multiLineCommentClosingTag": "#>",
        "space": " ",
        "lineFeed": "\n",
        "echoFunction": "echo",
        # Reserved for variables and assignment; not part of the active grammar.
        "variable": "$",
        "assignmentOperator": "=",
    }
)

ADDITION_OPERATOR = KEYWORDS["additionOperator"]
SUBTRACTION_OPERATOR = KEYWORDS["subtractionOperator"]
MULTIPLICATION_OPERATOR = KEYWORDS["multiplicationOperator"]
DIVISION_OPERATOR = KEYWORDS["divisionOperator"]
REMAINDER_OPERATOR = KEYWORDS["remainderOperator"]
GROUPING_OPENING_TAG = KEYWORDS["groupingOpeningTag"]
GROUPING_CLOSING_TAG = KEYWORDS["groupingClosingTag"]
SINGLE_LINE_COMMENT = KEYWORDS["singleLineComment"]
MULTI_LINE_COMMENT_OPENING_TAG = KEYWORDS["multiLineCommentOpeningTag"]
MULTI_LINE_COMMENT_CLOSING_TAG = KEYWORDS["multiLineCommentClosingTag"]
SPACE = KEYWORDS["space"]
LINE_FEED = KEYWORDS["lineFeed"]
ECHO_FUNCTION = KEYWORDS["echoFunction"]
VARIABLE = KEYWORDS["variable"]
ASSIGNMENT_OPERATOR = KEYWORDS["assignmentOperator"]
