"""
Search term parsing for namefilter.

Splits an ordered list of search terms into keywords and a logic mode. The
literal terms "or" and "and" select the logic; only the first one seen counts,
and any later operator-shaped term is kept as a keyword.
"""

import logging
from typing import Iterable, Optional, Union

from ..exceptions import ConfigurationError
from ..models.filter_config import FilterConfig, LogicMode


logger = logging.getLogger(__name__)


OPERATOR_TOKENS = {
    'or': LogicMode.OR,
    'and': LogicMode.AND,
}


def parse_search_terms(tokens: Union[str, Iterable[Optional[str]], None]) -> FilterConfig:
    """
    Parse search terms into a filter configuration.

    Args:
        tokens: Ordered search terms. A single string counts as one term.

    Returns:
        FilterConfig holding the keywords and logic mode

    Raises:
        ConfigurationError: If no keywords remain once operator and blank
            terms are removed
    """
    if tokens is None:
        tokens = []
    elif isinstance(tokens, str):
        tokens = [tokens]

    keywords = []
    logic = LogicMode.OR
    logic_explicit = False

    for token in tokens:
        text = '' if token is None else str(token).strip()

        if not logic_explicit and text.lower() in OPERATOR_TOKENS:
            logic = OPERATOR_TOKENS[text.lower()]
            logic_explicit = True
            logger.debug(f"Operator token '{text}' selects {logic.value.upper()} logic")
            continue

        if text:
            keywords.append(text)
        else:
            logger.debug("Discarding blank search term")

    if not keywords:
        raise ConfigurationError("No valid keywords supplied: at least one non-operator, non-blank search term is required")

    if len(keywords) > 1 and not logic_explicit:
        logic = LogicMode.OR

    config = FilterConfig(keywords=keywords, logic=logic, logic_explicit=logic_explicit)
    logger.debug(f"Parsed search terms into {len(config.keywords)} keyword(s): {config}")
    return config
