from __future__ import annotations

from dataclasses import asdict, dataclass


@dataclass(frozen=True)
class LinkPreview:
    root_address: str
    title: str | None = None
    description: str | None = None
    image_url: str | None = None

    @property
    def has_title(self) -> bool:
        return bool(self.title)

    def to_dict(self) -> dict[str, str | None]:
        return asdict(self)
