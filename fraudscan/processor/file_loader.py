from pathlib import Path

from fraudscan.processor.models import UploadedFile


class FileLoader:
    """Reads a local file into an UploadedFile."""

    def load(self, path: Path | str) -> UploadedFile:
        """Read file bytes from disk.

        Raises:
            FileNotFoundError: if the file does not exist.
        """
        path = Path(path)
        if not path.is_file():
            raise FileNotFoundError(f"File not found: {path}")
        return UploadedFile(name=path.name, data=path.read_bytes())
