"""
Batch processing for E-Divisive change-point detection.
"""

import json
from pathlib import Path
from typing import Tuple, Dict, Any, Optional
import logging

import numpy as np
import pandas as pd
from joblib import Parallel, delayed
from tqdm.auto import tqdm

from .methods import EDivisiveMethod
from .methods.base import CommonConfig, standardize_output, create_empty_metadata

logger = logging.getLogger(__name__)


def load_series(path: str) -> np.ndarray:
    """
    Load a single series from JSON, CSV or parquet.

    JSON may hold a bare list or an object with a 'series' key. Tables use
    the 'value' column when present, else their first column.
    """
    p = Path(path)
    suffix = p.suffix.lower()
    if suffix == '.json':
        with open(p, 'r') as f:
            data = json.load(f)
        if isinstance(data, dict):
            if 'series' not in data:
                raise ValueError(f"JSON file {path} has no 'series' key")
            data = data['series']
        return np.asarray(data, dtype=float)

    return series_from_frame(read_table(path))


def series_from_frame(df: pd.DataFrame) -> np.ndarray:
    """The 'value' column of a single-series table, else its first column."""
    column = 'value' if 'value' in df.columns else df.columns[0]
    return df[column].to_numpy(float)


def read_table(path: str) -> pd.DataFrame:
    lower = str(path).lower()
    if lower.endswith('.csv'):
        return pd.read_csv(path)
    return pd.read_parquet(path)


def is_multi_series(df: pd.DataFrame) -> bool:
    if isinstance(df.index, pd.MultiIndex):
        return 'id' in df.index.names
    return 'id' in df.columns


def process_one_series(id_value, g: pd.DataFrame,
                       config: Optional[Dict[str, Any]] = None) -> Tuple[Dict[str, Any], Dict[str, Any]]:
    """
    Run E-Divisive on a single series.

    Args:
        id_value: Series identifier
        g: DataFrame with the series rows, indexed by [id, time]
        config: E-Divisive configuration

    Returns:
        Tuple of (result_row, metadata_dict)
    """
    try:
        g_sorted = g.sort_index(level='time')
        values = g_sorted['value'].to_numpy(float)

        method = EDivisiveMethod(config)
        change_points, metadata = method.detect(values)

        return standardize_output(change_points, metadata, series_id=id_value)

    except Exception as e:
        logger.error(f"Error processing series {id_value}: {str(e)}")
        default_row = {
            'id': id_value,
            'n_change_points': 0,
            'change_points': []
        }
        default_meta = create_empty_metadata(series_id=id_value, method='edivisive')
        default_meta['error'] = str(e)
        default_meta['n_observations'] = len(g) if g is not None else 0
        return default_row, default_meta


def validate_input_dataframe(df: pd.DataFrame) -> bool:
    if isinstance(df.index, pd.MultiIndex):
        if df.index.names != ['id', 'time']:
            logger.warning("MultiIndex should have names ['id', 'time']")
            return False
    else:
        if not {'id', 'time'}.issubset(df.columns):
            logger.error("DataFrame must have 'id' and 'time' columns or MultiIndex [id, time]")
            return False
    if 'value' not in df.columns:
        logger.error("DataFrame must have a 'value' column")
        return False
    if not pd.api.types.is_numeric_dtype(df['value']):
        logger.error("'value' column must be numeric")
        return False
    return True


def run_batch(input_path: str, out_path: str, config: Optional[Dict[str, Any]] = None,
              n_jobs: Optional[int] = None, verbose: bool = True) -> pd.DataFrame:
    """
    Detect change points for every series of a table and save the results.

    Args:
        input_path: Parquet or CSV file with [id, time] and a 'value' column
        out_path: Output path; CSV when it ends in .csv, parquet otherwise
        config: E-Divisive configuration
        n_jobs: Number of parallel jobs (one series per job)
        verbose: Whether to show progress

    Returns:
        DataFrame indexed by id with change points and metadata columns
    """
    if n_jobs is None:
        n_jobs = CommonConfig.N_JOBS
    if config is None:
        config = {}

    logger.info(f'Loading {input_path}')
    df = read_table(input_path)
    return run_batch_frame(df, out_path, config=config, n_jobs=n_jobs, verbose=verbose)


def run_batch_frame(df: pd.DataFrame, out_path: Optional[str] = None,
                    config: Optional[Dict[str, Any]] = None, n_jobs: int = 1,
                    verbose: bool = True) -> pd.DataFrame:
    """Same as run_batch for a DataFrame already in memory; out_path is optional."""
    EDivisiveMethod(config).validate_config()
    if not validate_input_dataframe(df):
        raise ValueError("Invalid input DataFrame structure")
    if not isinstance(df.index, pd.MultiIndex):
        df = df.set_index(['id', 'time']).sort_index()

    ids = df.index.get_level_values('id').unique()
    logger.info(f'Total series: {len(ids)}')

    iterator = tqdm(ids, desc='Detecting change points') if verbose else ids
    if n_jobs == 1:
        results = [process_one_series(idv, df.xs(idv, level='id', drop_level=False), config)
                   for idv in iterator]
    else:
        results = Parallel(n_jobs=n_jobs, verbose=0, batch_size=1)(
            delayed(process_one_series)(idv, df.xs(idv, level='id', drop_level=False), config)
            for idv in iterator
        )

    rows = []
    for row, meta in results:
        merged = dict(row)
        merged.update({
            'status': meta.get('status', 'unknown'),
            'n_observations': meta.get('n_observations', 0),
            'processing_time': meta.get('processing_time', 0.0),
            'termination': meta.get('termination'),
            'error': meta.get('error')
        })
        rows.append(merged)
    result_df = pd.DataFrame(rows).set_index('id').sort_index()

    if out_path is not None:
        _save_df(result_df, out_path)
        logger.info(f'Saved change points to: {out_path}')

    return result_df


def _save_df(df: pd.DataFrame, path: str) -> None:
    out = Path(path)
    out.parent.mkdir(parents=True, exist_ok=True)
    if out.suffix.lower() == '.csv':
        df.to_csv(out, index=True)
    else:
        df.to_parquet(out, index=True)


def get_processing_summary(result_df: pd.DataFrame) -> Dict[str, Any]:
    summary = {
        'n_series': len(result_df),
        'n_successful': int((result_df['status'] == 'success').sum()),
        'n_failed': int((result_df['status'] == 'failed').sum()),
        'total_change_points': int(result_df['n_change_points'].sum()),
        'avg_change_points': float(result_df['n_change_points'].mean()) if len(result_df) else 0.0,
        'avg_processing_time': float(result_df['processing_time'].mean()) if len(result_df) else 0.0
    }
    return summary
