"""
Batch label encoding (CSV in, CSV out).
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict, Optional, Union

import pandas as pd

from .core.encoder import generate_gs1_code

logger = logging.getLogger(__name__)


def _row_params(row: pd.Series) -> Dict[str, Any]:
    return {key: value for key, value in row.items() if not pd.isna(value)}


def encode_dataframe(df: pd.DataFrame, template: Optional[str] = None) -> pd.DataFrame:
    """
    Encode every row of a DataFrame whose columns are field names.

    Returns a copy of df with code, human_readable, valid, errors and
    warnings columns appended. errors and warnings are joined with "; ".
    """
    results = [generate_gs1_code(_row_params(row), template=template) for _, row in df.iterrows()]

    out = df.copy()
    out["code"] = [r.code for r in results]
    out["human_readable"] = [r.human_readable for r in results]
    out["valid"] = [r.ok for r in results]
    out["errors"] = ["; ".join(r.errors) for r in results]
    out["warnings"] = ["; ".join(r.warnings) for r in results]

    failed = sum(1 for r in results if not r.ok)
    logger.info("Encoded %d rows (%d rejected)", len(results), failed)
    return out


def encode_csv(
    input_path: Union[str, Path],
    output_path: Optional[Union[str, Path]] = None,
    template: Optional[str] = None,
) -> pd.DataFrame:
    """
    Encode a CSV of label requests.

    All columns are read as text so GTINs keep their leading zeros and
    empty cells stay empty. When output_path is given the result is
    written there as CSV.
    """
    df = pd.read_csv(input_path, dtype=str, keep_default_na=False)
    result = encode_dataframe(df, template=template)

    if output_path is not None:
        path = Path(output_path)
        path.parent.mkdir(parents=True, exist_ok=True)
        result.to_csv(path, index=False)
        logger.info("Wrote %s", path)

    return result
