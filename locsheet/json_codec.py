import json
from typing import Any, Dict, List

from pydantic import ValidationError

from locsheet.models import FormatError, RecordStore, TranslationRecord


def _string_list(document: Any):
    # stringresources.strings.string がリストであること
    if not isinstance(document, dict):
        return None
    resources = document.get("stringresources")
    if not isinstance(resources, dict):
        return None
    strings = resources.get("strings")
    if not isinstance(strings, dict):
        return None
    string_list = strings.get("string")
    if not isinstance(string_list, list):
        return None
    return string_list


def parse_json(text: str) -> RecordStore:
    """
    ゲーム用JSON（stringresources.strings.string）をレコードに変換する
    """
    try:
        document = json.loads(text)
    except json.JSONDecodeError:
        raise FormatError("invalid JSON")

    string_list = _string_list(document)
    if string_list is None:
        raise FormatError("not a game translation document")

    records: List[TranslationRecord] = []
    for position, entry in enumerate(string_list):
        if not isinstance(entry, dict):
            raise FormatError(f"invalid string entry at position {position}")
        try:
            records.append(TranslationRecord.model_validate(entry))
        except ValidationError as e:
            raise FormatError(
                f"invalid string entry at position {position}: {e.error_count()} error(s)"
            ) from e

    return RecordStore(records)


def build_document(store: RecordStore) -> Dict[str, Any]:
    return {
        "stringresources": {
            "strings": {
                "string": [record.to_resource_entry() for record in store]
            }
        }
    }


def serialize_json(store: RecordStore) -> str:
    # 空のストアでも空配列のドキュメントを返す
    return json.dumps(build_document(store), ensure_ascii=False, indent=2)
