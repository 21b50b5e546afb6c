"""Source file selection: a path from the command line or a file dialog."""

from pathlib import Path

from notionflow.errors import SelectionError

CSV_EXTENSION = ".csv"


def validate_csv_path(path: str | Path) -> Path:
    path = Path(path)
    if path.suffix.lower() != CSV_EXTENSION:
        raise SelectionError(f"Please select a .csv file (got {path.name})")
    if not path.is_file():
        raise SelectionError(f"File not found: {path}")
    return path


class PathSelector:
    """Selector for a path that was already chosen, e.g. passed with --file."""

    def __init__(self, path: str | Path):
        self._path = path

    def __call__(self) -> Path:
        return validate_csv_path(self._path)


class DialogSelector:
    """Native file chooser restricted to .csv files."""

    def __init__(self, title: str = "Select a CSV file"):
        self._title = title

    def __call__(self) -> Path:
        try:
            import tkinter
            from tkinter import filedialog
        except ImportError as e:
            raise SelectionError("No file dialog available; pass the file with --file") from e

        try:
            root = tkinter.Tk()
        except tkinter.TclError as e:
            raise SelectionError(f"Cannot open a file dialog ({e}); pass the file with --file") from e
        root.withdraw()
        try:
            chosen = filedialog.askopenfilename(
                title=self._title,
                filetypes=[("CSV Files", "*.csv")],
            )
        finally:
            root.destroy()

        if not chosen:
            raise SelectionError("File selection canceled")
        return validate_csv_path(chosen)
