"""Repeated longest-common-substring similarity.

The metric does not stop at the single longest common substring: it extracts
it from both strings, then searches again in what remains, down to a minimum
substring length. The score is the total extracted length divided by the
length of the shorter input.

Described in P. Christen, "Data Matching", chapter 5.9, and in Friedman C.,
Sideli R., "Tolerating spelling errors during patient validation",
Comput Biomed Res. 1992 Oct;25(5):486-509.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from typing import Any, Callable, Optional

logger = logging.getLogger(__name__)

DEFAULT_MIN_LENGTH = 2


def _validate_min_length(min_length: Any) -> int:
    # bool is an int subclass, reject it explicitly
    if isinstance(min_length, bool) or not isinstance(min_length, int):
        raise TypeError(
            f"min_length must be an int, got {type(min_length).__name__}",
        )
    if min_length < 0:
        raise ValueError(f"min_length must be >= 0, got {min_length}")
    return min_length


def _require_str(value: Any, name: str) -> str:
    if not isinstance(value, str):
        raise TypeError(f"{name} must be a str, got {type(value).__name__}")
    return value


@dataclass(frozen=True)
class LCSConfig:
    """Configuration for the longest common substring comparator.

    Attributes:
        min_length: Shortest common substring that still counts towards the score

    """

    min_length: int = DEFAULT_MIN_LENGTH

    def __post_init__(self) -> None:
        """Validate configuration at construction time."""
        _validate_min_length(self.min_length)


def longest_common_substring(a: str, b: str) -> tuple[int, int, int]:
    """Find the first longest common substring of ``a`` and ``b``.

    The table is filled row by row (``i`` over ``a``, ``j`` over ``b``) and a
    cell only replaces the current best when it is strictly longer, so ties go
    to the match found earliest in that scan order.

    Args:
        a: First string
        b: Second string

    Returns:
        Tuple of (length, end_a, end_b) where the match is ``a[end_a - length:end_a]``
        and ``b[end_b - length:end_b]``. Length is 0 when nothing is shared.

    """
    longest = 0
    end_a = 0
    end_b = 0

    # only the previous row of the table is needed to fill the current one
    previous = [0] * len(b)
    for i, char_a in enumerate(a):
        current = [0] * len(b)
        for j, char_b in enumerate(b):
            if char_a != char_b:
                continue
            if i == 0 or j == 0:
                current[j] = 1
            else:
                current[j] = previous[j - 1] + 1

            if current[j] > longest:
                longest = current[j]
                end_a = i + 1
                end_b = j + 1
        previous = current

    return longest, end_a, end_b


def directional_score(
    a: str,
    b: str,
    min_length: int = DEFAULT_MIN_LENGTH,
    on_extract: Optional[Callable[[str, int], None]] = None,
) -> float:
    """Score ``a`` against ``b`` by repeatedly removing their longest common substring.

    The result depends on argument order: removing one match first changes
    what is left for later matches when candidates overlap.

    Args:
        a: First string
        b: Second string
        min_length: Stop once the longest remaining common substring is shorter
        on_extract: Optional callback(substring, removed_so_far) run after each extraction

    Returns:
        Total removed length divided by the shorter original length

    """
    shortlen = min(len(a), len(b))
    if shortlen == 0:
        return 0.0

    removed = 0
    while True:
        # table is rebuilt from scratch on every pass
        longest, end_a, end_b = longest_common_substring(a, b)
        if longest == 0 or longest < min_length:
            break

        extracted = a[end_a - longest : end_a]
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug(f"lcs | extracted={extracted!r} | length={longest}")

        a = a[: end_a - longest] + a[end_a:]
        b = b[: end_b - longest] + b[end_b:]
        removed += longest
        if on_extract is not None:
            on_extract(extracted, removed)

    return removed / shortlen


class LongestCommonSubstring:
    """Comparator scoring two strings by repeated longest common substring.

    The configured minimum length is read on every comparison. Set it up once
    before sharing the instance between threads; ``with_minimum_length``
    returns an independent copy instead of mutating this one.
    """

    def __init__(self, min_length: int = DEFAULT_MIN_LENGTH) -> None:
        self._config = LCSConfig(min_length=min_length)

    @classmethod
    def from_config(cls, config: LCSConfig) -> LongestCommonSubstring:
        """Build a comparator bound to an existing configuration."""
        return cls(min_length=config.min_length)

    @classmethod
    def from_settings(cls, settings: dict[str, Any] | None = None) -> LongestCommonSubstring:
        """Build a comparator from loaded settings.

        Args:
            settings: Settings dict as returned by ``load_settings``; defaults
                are used when None

        Returns:
            Configured comparator

        """
        from lcs_linkage.utils.io_utils import get_lcs_settings

        lcs_settings = get_lcs_settings(settings)
        return cls(min_length=lcs_settings["min_length"])

    @property
    def config(self) -> LCSConfig:
        return self._config

    @property
    def minimum_length(self) -> int:
        return self._config.min_length

    def compare(self, s1: str, s2: str) -> float:
        """Return the symmetric similarity of two strings in ``[0, 1]``.

        Args:
            s1: First string
            s2: Second string

        Returns:
            1.0 for identical strings, 0.0 when either is empty, otherwise
            the mean of both directional scores

        Raises:
            TypeError: If either argument is not a string

        """
        _require_str(s1, "s1")
        _require_str(s2, "s2")

        # quick cutoffs
        if s1 == s2:
            return 1.0
        if min(len(s1), len(s2)) == 0:
            return 0.0

        min_length = self._config.min_length
        return (
            directional_score(s1, s2, min_length) + directional_score(s2, s1, min_length)
        ) / 2.0

    def is_tokenized(self) -> bool:
        return True

    def set_minimum_length(self, min_length: int) -> None:
        """Replace the minimum substring length.

        Raises:
            TypeError: If min_length is not an int
            ValueError: If min_length is negative

        """
        self._config = replace(self._config, min_length=min_length)

    def get_minimum_length(self) -> int:
        return self._config.min_length

    def with_minimum_length(self, min_length: int) -> LongestCommonSubstring:
        """Return a new comparator with a different minimum length."""
        return type(self)(min_length=min_length)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(min_length={self._config.min_length})"
