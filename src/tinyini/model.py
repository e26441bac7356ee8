# -*- encoding: utf-8 -*-
# @File   : model.py
# @Time   : 2026/10/19 21:02:36
# @Author : Kariko Lin

"""
Basically INI Structure, sections of plain `str: str` pairs.

Both `IniSection` and `IniDocument` are read-only once built.
To build one, see `parser.parse_line()`.
"""

from collections.abc import Mapping
from typing import Iterator, overload


class IniSection(Mapping[str, str]):
    """A named group of key-value pairs.

    Keys are unique and case-sensitive. The parser keeps the *first*
    value of a duplicated key, so what's here is what was read first.
    """
    def __init__(
        self, section_name: str, /,
        pairs: Mapping[str, str] | None = None
    ) -> None:
        self._name = section_name
        # never keep the ptr of accumulator dicts.
        self.__data: dict[str, str] = dict(pairs or {})

    @property
    def name(self) -> str:
        return self._name

    def __getitem__(self, key: str) -> str:
        return self.__data[key]

    def __contains__(self, key: object) -> bool:
        return key in self.__data

    def __len__(self) -> int:
        return len(self.__data)

    def __iter__(self) -> Iterator[str]:
        return iter(self.__data)

    def __str__(self) -> str:
        return f"[{self._name}]"

    def __repr__(self) -> str:
        return '[%s] { .cnt = %d }' % (self._name, len(self.__data))

    def find(self, key: str) -> str | None:
        """`None` if `key` is absent."""
        return self.__data.get(key)

    def get(self, key: str, default: str = '') -> str:
        """Soft lookup. A missing key yields `default`, an empty string
        unless told otherwise."""
        value = self.find(key)
        return default if value is None else value

    def to_dict(self) -> dict[str, str]:
        return self.__data.copy()


class IniDocument(Mapping[str, IniSection]):
    """INI file representation, like:

        ```ini
        ; whole-line comments and blank lines are dropped,
        # so are pairs before any section.
        key = orphan

        [section]
        key = val
        url = http://x?y=1
        key = ignored
        ```

    Here `section` holds `key = val` (first value wins) and
    `url = http://x?y=1` (split on the first `=` only).
    There is no inline comment, `k = v ; note` keeps `v ; note`.

    Missing sections or keys are never exceptional for `get()`;
    use `find()` when "absent" and "empty" need telling apart.
    """
    def __init__(
        self, sections: Mapping[str, Mapping[str, str]] | None = None
    ) -> None:
        self.__sections: dict[str, IniSection] = {
            name: IniSection(name, pairs)
            for name, pairs in (sections or {}).items()
        }

    def __getitem__(self, key: str) -> IniSection:
        return self.__sections[key]

    def __contains__(self, key: object) -> bool:
        return key in self.__sections

    def __len__(self) -> int:
        return len(self.__sections)

    def __iter__(self) -> Iterator[str]:
        return iter(self.__sections)

    def __repr__(self) -> str:
        return f'IniDocument({list(self.__sections.values())!r})'

    def find(self, section: str) -> IniSection | None:
        return self.__sections.get(section)

    def find_key(self, section: str, key: str) -> str | None:
        """`None` if either `section` or `key` in it is absent."""
        if (sect := self.find(section)) is None:
            return None
        return sect.find(key)

    @overload
    def get(self, section: str) -> IniSection: ...
    @overload
    def get(self, section: str, key: str) -> str: ...

    def get(self, section: str, key: str | None = None) -> IniSection | str:
        """Soft lookup.

        - `get(section)`: the section, or an empty one if missing.
        - `get(section, key)`: the value, or `''` if missing.
        """
        sect = self.find(section)
        if sect is None:
            sect = IniSection(section)
        if key is None:
            return sect
        return sect.get(key)

    def to_dict(self) -> dict[str, dict[str, str]]:
        return {k: v.to_dict() for k, v in self.__sections.items()}
