import sys
from pathlib import Path
from typing import Optional
import configparser

from locsheet.session import ExportPayload

INPUT_EXTENSIONS = {".csv", ".json"}

def get_runtime_base_path() -> Path:
    """
    書き込み用の安全なベースパス。
    exe 配布時は exe のあるフォルダを返す。
    Python 実行時はカレントディレクトリを返す。
    """
    if getattr(sys, "frozen", False):
        return Path(sys.executable).resolve().parent
    else:
        return Path.cwd()

def resolve_input_file(argv: list[str]) -> Optional[Path]:
    """
    ドラッグ＆ドロップ、または引数指定されたCSV/JSONファイルを解決
    見つからない場合は None（ファイル選択ダイアログに任せる）
    """
    if len(argv) < 2:
        return None

    dropped_path = Path(argv[1]).resolve()

    if dropped_path.is_file() and dropped_path.suffix.lower() in INPUT_EXTENSIONS:
        return dropped_path

    print(f"[WARN] Not a CSV/JSON file: {dropped_path}")
    return None

# Config
def get_Config_Parser() -> configparser.ConfigParser:
    config_file = get_runtime_base_path().joinpath("config").joinpath("setting.ini")
    CONFIG = configparser.ConfigParser()
    CONFIG.read(config_file, encoding="utf-8")

    return CONFIG

def read_text_file(path: Path) -> str:
    if not path.exists():
        raise FileNotFoundError(f"input file not found: {path}")

    # Excel出力のBOM付きにも対応
    with path.open("r", encoding="utf-8-sig", newline="") as f:
        return f.read()

def save_export(payload: ExportPayload, output_dir: Path) -> Path:
    """
    エクスポート内容をファイルに保存する
    """
    output_dir.mkdir(parents=True, exist_ok=True)
    output_path = output_dir.joinpath(payload.filename)

    with output_path.open("w", encoding="utf-8", newline="") as f:
        f.write(payload.content)

    print(f"[Info] Exported {payload.mime_type}: {output_path}")
    return output_path
