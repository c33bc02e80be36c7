from dataclasses import dataclass

FIELDS = ("id", "updated", "title", "content", "link")


@dataclass(frozen=True)
class Entry:
    """One <entry> of the status feed, as parsed for the current run."""
    id: str
    updated: str
    title: str
    content: str
    link: str


@dataclass(frozen=True)
class Incident:
    id: str
    updated: str
    title: str
    content: str
    link: str

    @classmethod
    def from_entry(cls, entry: Entry) -> "Incident":
        return cls(
            id=entry.id,
            updated=entry.updated,
            title=entry.title,
            content=entry.content,
            link=entry.link,
        )

    def to_json(self) -> dict:
        return {
            "id": self.id,
            "updated": self.updated,
            "title": self.title,
            "content": self.content,
            "link": self.link,
        }

    @staticmethod
    def from_json(data: dict) -> "Incident":
        """Build an Incident from its stored form.

        Missing or null fields become "". Any other non-string value raises
        TypeError.
        """
        values = []
        for key in FIELDS:
            value = data.get(key)
            if value is None:
                value = ""
            elif not isinstance(value, str):
                raise TypeError(
                    f"field {key!r} must be a string, got {type(value).__name__}"
                )
            values.append(value)
        return Incident(*values)
