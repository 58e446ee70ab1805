from typing import List, Optional

import pandas as pd

from locsheet.languages import language_label
from locsheet.models import RecordStore, StoreStats


def describe_languages(store: RecordStore) -> List[str]:
    return [language_label(lang) for lang in store.languages_present()]


def format_stats(stats: StoreStats) -> str:
    return "\n".join([
        f"Total keys:           {stats.record_count}",
        f"Languages:            {stats.language_count}",
        f"Translations:         {stats.filled_cells}",
        f"Missing translations: {stats.missing_cells}",
    ])


def build_preview_frame(store: RecordStore, limit: Optional[int] = None) -> pd.DataFrame:
    """
    プレビュー用の表（Key + 翻訳がある言語の列）
    翻訳なしのセルは空文字
    """
    languages = list(store.languages_present())
    columns = ["Key"] + [lang.upper() for lang in languages]

    records = store.records if limit is None else store.records[:limit]
    rows = [
        [record.id] + [record.get(lang) or "" for lang in languages]
        for record in records
    ]

    return pd.DataFrame(rows, columns=columns)
