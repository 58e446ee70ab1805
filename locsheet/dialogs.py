import tkinter as tk
from tkinter import filedialog
from pathlib import Path
from typing import Optional

def select_input_file_dialog(initial_dir: Path) -> Optional[Path]:
    root = tk.Tk()
    root.withdraw()

    selected = filedialog.askopenfilename(
        title="Select translation file",
        initialdir=str(initial_dir),
        filetypes=[("Translation files", "*.csv *.json"), ("CSV", "*.csv"), ("JSON", "*.json")],
    )
    root.destroy()

    # キャンセル時は空文字
    if not selected:
        return None
    return Path(selected)


def copy_to_clipboard(text: str) -> None:
    root = tk.Tk()
    root.withdraw()
    root.clipboard_clear()
    root.clipboard_append(text)
    # ウィンドウ破棄前にクリップボードへ確定させる
    root.update()
    root.destroy()
