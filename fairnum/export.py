import json
import logging
from typing import Dict, List

import pandas as pd

logger = logging.getLogger(__name__)


def write_records(path: str, records: List[Dict]) -> int:
    """Append generated rows to a CSV or JSON file, creating it if needed."""
    if path.lower().endswith('.csv'):
        df_new = pd.DataFrame.from_records(records)
        try:
            df_old = pd.read_csv(path)
            df_out = pd.concat([df_old, df_new], ignore_index=True)
        except FileNotFoundError:
            df_out = df_new
        df_out.to_csv(path, index=False)
    elif path.lower().endswith('.json'):
        try:
            with open(path, 'r', encoding='utf-8') as f:
                data = json.load(f)
            if not isinstance(data, list):
                data = data.get('records') or []
        except FileNotFoundError:
            data = []
        data.extend(records)
        with open(path, 'w', encoding='utf-8') as f:
            json.dump(data, f)
    else:
        raise ValueError('Unsupported output format; use CSV or JSON')
    logger.debug("wrote %d records to %s", len(records), path)
    return len(records)


def load_values(path: str, column: str) -> pd.Series:
    if path.lower().endswith(".csv"):
        df = pd.read_csv(path)
    elif path.lower().endswith(".json"):
        with open(path, 'r', encoding='utf-8') as f:
            data = json.load(f)
        if not isinstance(data, list):
            data = data.get('records', [])
        df = pd.DataFrame(data)
    else:
        raise ValueError("Unsupported file format; use CSV or JSON")

    if column not in df.columns:
        raise ValueError(f"Missing column '{column}'")

    return pd.to_numeric(df[column], errors="coerce").dropna().reset_index(drop=True)
