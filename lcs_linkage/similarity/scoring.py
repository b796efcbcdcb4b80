"""Bulk similarity scoring for candidate pairs."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Any, Callable

import numpy as np
import pandas as pd
from rapidfuzz import process

from lcs_linkage.similarity.lcs import LongestCommonSubstring
from lcs_linkage.similarity.types import Comparator, PairScore
from lcs_linkage.utils.io_utils import get_lcs_settings

logger = logging.getLogger(__name__)

PAIR_COLUMNS = ["id_a", "id_b", "score"]


def _resolve_comparator(
    comparator: Comparator | None,
    settings: dict[str, Any] | None,
) -> Comparator:
    if comparator is not None:
        return comparator
    return LongestCommonSubstring.from_settings(settings)


def _as_rapidfuzz_scorer(comparator: Comparator) -> Callable[..., float]:
    """Wrap a comparator so RapidFuzz can call it as a custom scorer."""

    def scorer(s1: str, s2: str, **_kwargs: Any) -> float:
        # RapidFuzz passes processor/score_cutoff keywords, none apply here
        return comparator.compare(s1, s2)

    return scorer


def score_pairs(
    df: pd.DataFrame,
    candidate_pairs: Sequence[tuple[Any, Any]],
    comparator: Comparator | None = None,
    settings: dict[str, Any] | None = None,
    name_column: str = "name",
    id_column: str = "record_id",
) -> pd.DataFrame:
    """Compute similarity scores for candidate pairs of records.

    Args:
        df: DataFrame holding one record per row
        candidate_pairs: List of (index_a, index_b) tuples of ``df`` index labels
        comparator: Comparator to apply; built from settings when None
        settings: Configuration settings
        name_column: Column holding the field value to compare
        id_column: Column holding the record identifier

    Returns:
        DataFrame with id_a, id_b and score columns, filtered on the
        configured minimum score

    Raises:
        ValueError: If a required column is missing or a compared value is null

    """
    missing = [c for c in (name_column, id_column) if c not in df.columns]
    if missing:
        raise ValueError(f"Missing required columns: {missing}")

    comparator = _resolve_comparator(comparator, settings)
    min_score = float(get_lcs_settings(settings)["min_score"])

    if not candidate_pairs:
        logger.info("No candidate pairs to score")
        return pd.DataFrame(columns=PAIR_COLUMNS)

    logger.info(f"Scoring {len(candidate_pairs)} candidate pairs with {comparator!r}")

    name_array = df[name_column].values
    id_array = df[id_column].values
    index_map = {label: pos for pos, label in enumerate(df.index)}

    scores: list[PairScore] = []
    for idx_a, idx_b in candidate_pairs:
        pos_a = index_map[idx_a]
        pos_b = index_map[idx_b]
        value_a = name_array[pos_a]
        value_b = name_array[pos_b]
        if pd.isna(value_a) or pd.isna(value_b):
            raise ValueError(
                f"Null {name_column} in candidate pair ({idx_a}, {idx_b})",
            )
        scores.append(
            {
                "id_a": id_array[pos_a],
                "id_b": id_array[pos_b],
                "score": comparator.compare(value_a, value_b),
            },
        )

    pairs_df = pd.DataFrame.from_records(scores, columns=PAIR_COLUMNS)
    pairs_df = pairs_df[pairs_df["score"] >= min_score].copy()

    # Sort explicitly: id_a, id_b ascending, score descending
    pairs_df = pairs_df.sort_values(
        ["id_a", "id_b", "score"],
        ascending=[True, True, False],
    ).reset_index(drop=True)

    logger.info(
        f"Final result: {len(pairs_df)} pairs at or above min_score ({min_score})",
    )
    return pairs_df


def score_matrix(
    queries: Sequence[str],
    choices: Sequence[str],
    comparator: Comparator | None = None,
    settings: dict[str, Any] | None = None,
    workers: int = 1,
) -> np.ndarray:
    """Compute the full query x choice similarity matrix.

    Args:
        queries: Strings forming the rows
        choices: Strings forming the columns
        comparator: Comparator to apply; built from settings when None
        settings: Configuration settings
        workers: Worker count forwarded to RapidFuzz

    Returns:
        float64 array of shape (len(queries), len(choices))

    """
    comparator = _resolve_comparator(comparator, settings)
    logger.debug(f"score_matrix | queries={len(queries)} | choices={len(choices)}")

    return process.cdist(
        queries,
        choices,
        scorer=_as_rapidfuzz_scorer(comparator),
        dtype=np.float64,
        workers=workers,
    )
