import sys
from pathlib import Path
import configparser
import traceback

from locsheet.models import FormatError
from locsheet.session import TranslationSession
from locsheet.report import build_preview_frame, describe_languages, format_stats
from locsheet.utility import get_runtime_base_path, resolve_input_file, get_Config_Parser, read_text_file, save_export

BASE_PATH: Path = get_runtime_base_path()

# Config
CONFIG: configparser.ConfigParser = get_Config_Parser()
OUTPUT_DIR: Path = BASE_PATH.joinpath(CONFIG.get("GENERAL", "OUTPUT_DIR", fallback="Exported"))
PREVIEW_ROWS: int = CONFIG.getint("GENERAL", "PREVIEW_ROWS", fallback=20)

def convert_file(session: TranslationSession, input_path: Path) -> bool:
    """
    単一ファイル処理
    取り込み→統計表示→もう一方の形式で出力（CSV→JSON, JSON→CSV）
    """
    try:
        text = read_text_file(input_path)

        if input_path.suffix.lower() == ".csv":
            store = session.import_csv(text)
            payload = session.export_json()
        else:
            store = session.import_json(text)
            payload = session.export_csv()

        print(format_stats(store.stats()))
        languages = describe_languages(store)
        if languages:
            print("[Info] Languages: " + ", ".join(languages))
        if not store.is_empty():
            print(build_preview_frame(store, PREVIEW_ROWS).to_string(index=False))

        if payload is None:
            return False
        save_export(payload, OUTPUT_DIR)

        if CONFIG.getboolean("GENERAL", "COPY_JSON_TO_CLIPBOARD", fallback=False):
            from locsheet.dialogs import copy_to_clipboard
            copy_to_clipboard(session.clipboard_text())
            print("[Info] JSON copied to clipboard!")

    except FormatError as e:
        print(f"[Error] {input_path.name}: {e.reason}")
        return False
    except Exception as e:
        print(f"[Exception] {input_path.name} / {e}")
        traceback.print_exc()
        return False

    print(f"[OK] Finished: {input_path.name}")
    return True


def main():
    input_path = resolve_input_file(sys.argv)
    if input_path is None:
        from locsheet.dialogs import select_input_file_dialog
        input_path = select_input_file_dialog(BASE_PATH)
    if input_path is None:
        print("[INFO] File selection cancelled.")
        return

    session = TranslationSession(
        json_export_name=CONFIG.get("GENERAL", "JSON_EXPORT_NAME", fallback="translations.json"),
        csv_export_name=CONFIG.get("GENERAL", "CSV_EXPORT_NAME", fallback="translations.csv"),
    )
    if not convert_file(session, input_path):
        sys.exit(1)

if __name__ == "__main__":
    main()
