from dataclasses import dataclass

@dataclass(frozen=True)
class FileData:
    name: str
    content: str
    size: int
