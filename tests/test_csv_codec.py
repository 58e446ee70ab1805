from __future__ import annotations

import pytest

from locsheet.csv_codec import parse_csv, serialize_csv, tokenize_csv_line
from locsheet.models import FormatError, RecordStore, TranslationRecord


HEADER = "CONTEXT,EN,DE,ES,FR,IT,BR PT,RU"


def test_tokenize_handles_quoted_commas_and_doubled_quotes() -> None:
    assert tokenize_csv_line('"a,b","say ""hi""",plain') == ["a,b", 'say "hi"', "plain"]


def test_tokenize_empty_line_yields_single_empty_field() -> None:
    assert tokenize_csv_line("") == [""]


def test_tokenize_keeps_trailing_empty_field() -> None:
    assert tokenize_csv_line('"x",') == ["x", ""]


def test_parse_single_row_leaves_empty_cells_absent() -> None:
    store = parse_csv(HEADER + '\n"greeting","Hello","Hallo","","","","",""')

    assert len(store) == 1
    record = store.records[0]
    assert record.id == "greeting"
    assert record.translations == {"en": "Hello", "de": "Hallo"}
    assert record.es is None
    assert store.stats().missing_cells == 5


def test_parse_generates_synthetic_id_from_line_index() -> None:
    text = "\n".join([
        HEADER,
        '"a","A","","","","","",""',
        '"b","B","","","","","",""',
        '"","C","","","","","",""',
        '"null","D","","","","","",""',
    ])
    store = parse_csv(text)

    assert [record.id for record in store] == ["a", "b", "translation_3", "translation_4"]


def test_parse_skips_rows_shorter_than_context_column() -> None:
    text = "\n".join([
        "EN,CONTEXT",
        "only-one-cell",
        'Hello,"greeting"',
    ])
    store = parse_csv(text)

    assert [record.id for record in store] == ["greeting"]
    assert store.records[0].en == "Hello"


def test_parse_context_column_is_substring_match() -> None:
    store = parse_csv('"CONTEXT – PLEASE, LOOK HERE",EN\n"k","v"')
    assert store.records[0].id == "k"
    assert store.records[0].en == "v"


def test_parse_ignores_unknown_headers() -> None:
    store = parse_csv("CONTEXT,EN,JP\nk,hello,konnichiwa")
    assert store.records[0].translations == {"en": "hello"}


def test_parse_trims_cells_and_handles_crlf() -> None:
    store = parse_csv("CONTEXT,EN,RU\r\n  key  ,  Hello  ,Privet\r\n")
    record = store.records[0]
    assert record.id == "key"
    assert record.en == "Hello"
    assert record.ru == "Privet"


def test_parse_strips_byte_order_mark() -> None:
    store = parse_csv("\ufeffCONTEXT,EN\nk,v")
    assert store.records[0].en == "v"


@pytest.mark.parametrize(
    "text, reason",
    [
        ("", "too few rows"),
        (HEADER, "too few rows"),
        ('KEY,EN\n"k","v"', "missing CONTEXT column"),
        ('context,EN\n"k","v"', "missing CONTEXT column"),
        ('CONTEXT,JP,KR\n"k","v","w"', "no recognized language columns"),
    ],
)
def test_parse_rejects_malformed_documents(text: str, reason: str) -> None:
    with pytest.raises(FormatError) as exc_info:
        parse_csv(text)
    assert exc_info.value.reason == reason


def test_serialize_writes_fixed_header_and_quoted_rows() -> None:
    store = RecordStore([
        TranslationRecord(id="greeting", en="Hello", br='Olá "amigo"'),
    ])
    lines = serialize_csv(store).splitlines()

    assert lines[0] == '"CONTEXT – PLEASE, LOOK HERE FOR SPECIFICATIONS",EN,DE,ES,FR,IT,BR PT,RU'
    assert lines[1] == '"greeting","Hello","","","","","Olá ""amigo""",""'


def test_serialize_then_parse_keeps_records() -> None:
    text = "\n".join([
        HEADER,
        '"menu.start","Start","Starten","","Démarrer","","","Старт"',
        '"menu.quit","Quit, now","","Salir","","","",""',
        '"","Orphan","","","","","",""',
    ])
    first = parse_csv(text)
    second = parse_csv(serialize_csv(first))

    assert [r.model_dump() for r in second] == [r.model_dump() for r in first]


def test_literal_double_quote_survives_round_trip() -> None:
    store = RecordStore([TranslationRecord(id="quote", en='He said "hi"', de='""')])
    parsed = parse_csv(serialize_csv(store))

    assert parsed.records[0].en == 'He said "hi"'
    assert parsed.records[0].de == '""'
