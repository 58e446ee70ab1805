from typing import Dict, List

from locsheet.languages import (
    CSV_COLUMN_MAP,
    CSV_CONTEXT_HEADER,
    CSV_CONTEXT_MARKER,
    CSV_LANGUAGE_ORDER,
    csv_label,
)
from locsheet.models import FormatError, RecordStore, TranslationRecord


def tokenize_csv_line(line: str) -> List[str]:
    """
    1行分をフィールドに分割する。
    - "..." で囲まれた範囲のカンマは区切りとみなさない
    - 囲み中の "" はダブルクォート1文字
    - クォート状態は行をまたがない
    """
    fields: List[str] = []
    current: List[str] = []
    in_quotes = False

    i = 0
    while i < len(line):
        char = line[i]
        if char == '"':
            if in_quotes and i + 1 < len(line) and line[i + 1] == '"':
                current.append('"')
                i += 1
            else:
                in_quotes = not in_quotes
        elif char == "," and not in_quotes:
            fields.append("".join(current))
            current = []
        else:
            current.append(char)
        i += 1

    fields.append("".join(current))
    return fields


def find_language_columns(headers: List[str]) -> Dict[str, int]:
    language_columns: Dict[str, int] = {}
    for index, header in enumerate(headers):
        lang = CSV_COLUMN_MAP.get(header.strip())
        if lang:
            language_columns[lang] = index
    return language_columns


def parse_csv(text: str) -> RecordStore:
    """
    CSVテキストをレコードに変換する

    CSV列: CONTEXT（id）, EN, DE, ES, FR, IT, BR PT, RU
    """
    lines = [line.rstrip("\r") for line in text.lstrip("\ufeff").strip().split("\n")]
    if len(lines) < 2:
        raise FormatError("too few rows")

    headers = tokenize_csv_line(lines[0])
    context_index = next(
        (index for index, header in enumerate(headers) if CSV_CONTEXT_MARKER in header),
        -1,
    )
    if context_index == -1:
        raise FormatError("missing CONTEXT column")

    language_columns = find_language_columns(headers)
    if not language_columns:
        raise FormatError("no recognized language columns")

    records: List[TranslationRecord] = []
    for i in range(1, len(lines)):
        row = tokenize_csv_line(lines[i])
        # 列が足りない行は読み飛ばす
        if len(row) <= context_index:
            continue

        record_id = row[context_index].strip()
        if not record_id or record_id == "null":
            record_id = f"translation_{i}"

        translations: Dict[str, str] = {}
        for lang, column in language_columns.items():
            # 空セルは「翻訳なし」（キー自体を持たない）
            if column < len(row) and row[column]:
                translations[lang] = row[column].strip()

        records.append(TranslationRecord(id=record_id, **translations))

    return RecordStore(records)


def _quote(value: str) -> str:
    return '"' + value.replace('"', '""') + '"'


def serialize_csv(store: RecordStore) -> str:
    # ヘッダーのラベルはカンマを含むため、囲んで出力する
    header = [_quote(CSV_CONTEXT_HEADER)] + [csv_label(lang) for lang in CSV_LANGUAGE_ORDER]
    lines = [",".join(header)]

    for record in store:
        # idはエスケープしない
        row = [f'"{record.id}"']
        for lang in CSV_LANGUAGE_ORDER:
            row.append(_quote(record.get(lang) or ""))
        lines.append(",".join(row))

    return "\n".join(lines) + "\n"
