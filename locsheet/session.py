from typing import Optional

from pydantic import BaseModel

from locsheet.csv_codec import parse_csv, serialize_csv
from locsheet.json_codec import parse_json, serialize_json
from locsheet.models import RecordStore

JSON_MIME_TYPE = "application/json"
CSV_MIME_TYPE = "text/csv"


class ExportPayload(BaseModel):
    filename: str
    content: str
    mime_type: str


class TranslationSession:
    """
    編集中のドキュメントを保持する。
    取り込みが成功した時だけストアを置き換え、失敗時は前のストアを残す。
    """
    def __init__(self, json_export_name: str = "translations.json", csv_export_name: str = "translations.csv"):
        self.store = RecordStore.empty()
        self.json_export_name = json_export_name
        self.csv_export_name = csv_export_name

    def import_csv(self, text: str) -> RecordStore:
        store = parse_csv(text)
        self.store = store
        print(f"[Info] CSV imported: {len(store)} strings")
        return store

    def import_json(self, text: str) -> RecordStore:
        store = parse_json(text)
        self.store = store
        print(f"[Info] JSON imported: {len(store)} strings")
        return store

    def clear(self) -> None:
        self.store = RecordStore.empty()
        print("[Info] All data cleared")

    def export_json(self) -> Optional[ExportPayload]:
        if self.store.is_empty():
            print("[WARN] No translation data to export")
            return None
        return ExportPayload(
            filename=self.json_export_name,
            content=serialize_json(self.store),
            mime_type=JSON_MIME_TYPE,
        )

    def export_csv(self) -> Optional[ExportPayload]:
        if self.store.is_empty():
            print("[WARN] No translation data to export")
            return None
        return ExportPayload(
            filename=self.csv_export_name,
            content=serialize_csv(self.store),
            mime_type=CSV_MIME_TYPE,
        )

    def clipboard_text(self) -> Optional[str]:
        if self.store.is_empty():
            return None
        return serialize_json(self.store)
