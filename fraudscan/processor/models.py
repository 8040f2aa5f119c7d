from dataclasses import dataclass


@dataclass(frozen=True)
class UploadedFile:
    """A submitted file: its original name and raw bytes."""

    name: str
    data: bytes
