from typing import Any, Dict, Iterator, List, Optional

from pydantic import BaseModel, ConfigDict, field_validator

from locsheet.languages import CSV_LANGUAGE_ORDER


class FormatError(ValueError):
    """
    CSV/JSONの取り込み失敗（理由の文字列を保持する）
    """
    def __init__(self, reason: str):
        super().__init__(reason)
        self.reason = reason


# Record
class TranslationRecord(BaseModel):
    """
    1つの文字列キーと言語ごとの翻訳。
    対応言語以外のキーは extra として保持し、JSON出力時にそのまま戻す。
    """
    model_config = ConfigDict(extra="allow")

    id: str
    en: Optional[str] = None
    de: Optional[str] = None
    es: Optional[str] = None
    fr: Optional[str] = None
    it: Optional[str] = None
    br: Optional[str] = None
    ru: Optional[str] = None

    @field_validator("id")
    @classmethod
    def id_not_empty(cls, value: str) -> str:
        if value == "":
            raise ValueError("id must not be empty")
        return value

    @property
    def extra_fields(self) -> Dict[str, Any]:
        return dict(self.model_extra or {})

    @property
    def translations(self) -> Dict[str, str]:
        # None = 翻訳なし、"" = 空文字の翻訳あり
        return {
            lang: getattr(self, lang)
            for lang in CSV_LANGUAGE_ORDER
            if getattr(self, lang) is not None
        }

    def get(self, lang: str) -> Optional[str]:
        return getattr(self, lang)

    def has_translation(self, lang: str) -> bool:
        value = getattr(self, lang)
        return value is not None and value != ""

    def to_resource_entry(self) -> Dict[str, Any]:
        # id → 言語（正規順）→ その他のキー
        entry: Dict[str, Any] = {"id": self.id}
        entry.update(self.translations)
        entry.update(self.extra_fields)
        return entry


class StoreStats(BaseModel):
    record_count: int
    language_count: int
    filled_cells: int
    missing_cells: int


# Store
class RecordStore:
    """
    現在のドキュメント（レコードの順序付きリスト）。I/Oは行わない。
    取り込みのたびに丸ごと置き換える。
    """
    def __init__(self, records: Optional[List[TranslationRecord]] = None):
        self.records: List[TranslationRecord] = list(records or [])

    @classmethod
    def empty(cls) -> "RecordStore":
        return cls()

    def __len__(self) -> int:
        return len(self.records)

    def __iter__(self) -> Iterator[TranslationRecord]:
        return iter(self.records)

    def is_empty(self) -> bool:
        return not self.records

    def languages_present(self) -> Iterator[str]:
        """
        1件以上のレコードに翻訳がある言語を正規順で返す（呼ぶたびに最初から）
        """
        for lang in CSV_LANGUAGE_ORDER:
            if any(record.has_translation(lang) for record in self.records):
                yield lang

    def stats(self) -> StoreStats:
        filled = 0
        missing = 0
        languages = set()

        for record in self.records:
            for lang in CSV_LANGUAGE_ORDER:
                if record.has_translation(lang):
                    languages.add(lang)
                    filled += 1
                else:
                    missing += 1

        return StoreStats(
            record_count=len(self.records),
            language_count=len(languages),
            filled_cells=filled,
            missing_cells=missing,
        )
