from typing import Any, Iterator

from .entry import Entry, KeyValue, ValueOnly
from .parser import Parser
from .section import Section


class Document:
    """Sections of an INF file, in the order they first appear."""

    def __init__(self, sections: list[Section]) -> None:
        self._sections: CaseInsensitiveDict[CaseInsensitiveKey, Section]
        self._sections = CaseInsensitiveDict()

        for section in sections:
            self._sections[section.name] = section

    @classmethod
    def parse(cls, p: Parser) -> "Document":
        # A section may be declared more than once; later occurrences add
        # their entries to the first one.
        names: CaseInsensitiveDict[CaseInsensitiveKey, str]
        names = CaseInsensitiveDict()
        entries: CaseInsensitiveDict[CaseInsensitiveKey, list[Entry]]
        entries = CaseInsensitiveDict()

        while p.current is not None:
            section = Section.parse(p)

            if section.name not in names:
                names[section.name] = section.name
                entries[section.name] = []

            entries[section.name].extend(section.entries)

        return cls(
            sections=[
                Section(name=name, entries=tuple(entries[name]))
                for name in names.values()
            ]
        )

    def __iter__(self) -> Iterator[Section]:
        return iter(self._sections.values())

    def __len__(self) -> int:
        return len(self._sections)

    def __contains__(self, name: object) -> bool:
        return name in self._sections

    def __getitem__(self, name: str) -> Section:
        return self._sections[name]

    def __eq__(self, other: object) -> bool:
        match other:
            case Document():
                return list(self) == list(other)
            case _:
                return NotImplemented

    def __repr__(self) -> str:
        return f"Document(sections={list(self)!r})"

    def get(self, name: str, default: Section | None = None) -> Section | None:
        return self._sections.get(name, default)

    def section_names(self) -> list[str]:
        return [section.name for section in self]

    def as_dict(self) -> dict["CaseInsensitiveKey", Any]:
        # Microsoft's INF syntax rules state:
        #
        # > Section names, entries, and directives are case-insensitive.
        #
        # <https://learn.microsoft.com/en-us/windows-hardware/drivers/install/general-syntax-rules-for-inf-files#-case-sensitivity>
        d: CaseInsensitiveDict[CaseInsensitiveKey, Any] = CaseInsensitiveDict()

        for section in self:
            d[section.name] = CaseInsensitiveDict()
            d[section.name][""] = []

            # Each element represents a single line in the file.
            for entry in section:
                match entry:
                    case ValueOnly(values=values):
                        # Flatten the inner lists if there is only one element.
                        d[section.name][""].append(
                            values[0] if len(values) == 1 else list(values)
                        )
                    case KeyValue(key=key, values=values):
                        d[section.name][key] = list(values)

        return d


class CaseInsensitiveKey:
    def __init__(self, key: str) -> None:
        self.key = key

    def __hash__(self) -> int:
        return hash(self.key.lower())

    def __eq__(self, other: object) -> bool:
        match other:
            case CaseInsensitiveKey():
                return self.key.lower() == other.key.lower()
            case str():
                return self.key.lower() == other.lower()
            case _:
                return NotImplemented

    def __str__(self) -> str:
        return self.key

    def __repr__(self) -> str:
        return repr(self.key)


class CaseInsensitiveDict(dict[CaseInsensitiveKey, Any]):
    def __setitem__(self, key: str, value: Any) -> None:
        super().__setitem__(CaseInsensitiveKey(key), value)

    def __getitem__(self, key: str) -> Any:
        return super().__getitem__(CaseInsensitiveKey(key))

    def __delitem__(self, key: str) -> None:
        super().__delitem__(CaseInsensitiveKey(key))

    def __contains__(self, key: object) -> bool:
        if not isinstance(key, str):
            return False

        return super().__contains__(CaseInsensitiveKey(key))

    def get(self, key: str, default: Any = None) -> Any:
        return super().get(CaseInsensitiveKey(key), default)
