"""Fuzzy search engine ranking strings and records against a query."""

import logging
from collections.abc import Mapping, Sequence
from typing import Any, Optional, Union

from src.fuzzysearch.extract import extract_text
from src.fuzzysearch.metric import normalize, similarity
from src.fuzzysearch.models import Options, SearchResult

logger = logging.getLogger(__name__)

OptionsInput = Union[Options, Mapping[str, Any], None]


class FuzzySearch:
    """
    Typo-tolerant search over a fixed list of items.

    The item list and options are bound once and never mutated, so a single
    engine can serve concurrent searches without locking. Create a new engine
    for a different configuration.
    """

    def __init__(
        self,
        items: Optional[Sequence[Any]] = None,
        options: OptionsInput = None,
    ):
        """
        Initialize the engine.

        Args:
            items: Strings or records to search (default empty)
            options: An Options instance, or a mapping of option fields; any
                field left out takes its default

        Raises:
            pydantic.ValidationError: If an option value is out of range or
                of the wrong type
        """
        self.items: tuple[Any, ...] = tuple(items) if items is not None else ()
        if isinstance(options, Options):
            self.options = options
        else:
            self.options = Options.model_validate(dict(options or {}))

        logger.debug(
            f"Bound {len(self.items)} items (threshold={self.options.threshold}, "
            f"keys={list(self.options.keys)}, case_sensitive={self.options.case_sensitive})"
        )

    def search(self, query: str) -> list[SearchResult]:
        """
        Rank items by similarity to the query.

        Each item is scored by the first of its fragments (in key order) that
        falls within the threshold, not by its best fragment. Items without
        such a fragment are left out.

        Args:
            query: The text typed by the user

        Returns:
            Matching items, best score first; equal scores keep list order
        """
        threshold = self.options.threshold
        case_sensitive = self.options.case_sensitive
        normalized_query = normalize(query, case_sensitive)

        results = []
        for item in self.items:
            for text in extract_text(item, self.options.keys):
                score = similarity(normalized_query, normalize(text, case_sensitive))
                if score <= threshold:
                    results.append(SearchResult(item=item, score=score))
                    break

        # list.sort is stable, ties keep their input order
        results.sort(key=lambda result: result.score)

        logger.debug(f"Query {query!r} matched {len(results)} of {len(self.items)} items")
        return results


def create(items: Optional[Sequence[Any]] = None, options: OptionsInput = None) -> FuzzySearch:
    """Build a search engine for the given items and (possibly partial) options."""
    return FuzzySearch(items, options)
