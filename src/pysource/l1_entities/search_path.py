"""L1 entities: search-path templates and the ordered registry that holds them."""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from pydantic import BaseModel, ConfigDict

from pysource.l1_entities.errors import SearchPathTemplateError

SLOT = '%s'


class SearchPathTemplate(BaseModel):
    """A candidate path with one substitution point for the module name.

    Stored as the text before and after the slot, so the module name is
    spliced in verbatim and never read as formatting syntax.
    """

    model_config = ConfigDict(frozen=True)

    prefix: str
    suffix: str = ''

    @classmethod
    def parse(cls, text: str) -> SearchPathTemplate:
        """Build a template from a string holding exactly one ``%s`` slot."""
        count = text.count(SLOT)
        if count != 1:
            raise SearchPathTemplateError(
                f'Search path template must contain exactly one {SLOT!r} slot, got {count}: {text!r}'
            )
        prefix, suffix = text.split(SLOT)
        return cls(prefix=prefix, suffix=suffix)

    def expand(self, name: str) -> str:
        return f'{self.prefix}{name}{self.suffix}'

    def __str__(self) -> str:
        return f'{self.prefix}{SLOT}{self.suffix}'


class SearchPathRegistry:
    """Ordered, mutable list of templates. Insertion order is precedence order.

    Entries are never deduplicated or reordered here; consumers take a
    snapshot at call time.
    """

    def __init__(self, templates: Iterable[SearchPathTemplate | str] = ()) -> None:
        self._templates: list[SearchPathTemplate] = []
        self.extend(templates)

    @staticmethod
    def _coerce(template: SearchPathTemplate | str) -> SearchPathTemplate:
        if isinstance(template, SearchPathTemplate):
            return template
        return SearchPathTemplate.parse(template)

    def append(self, template: SearchPathTemplate | str) -> None:
        self._templates.append(self._coerce(template))

    def extend(self, templates: Iterable[SearchPathTemplate | str]) -> None:
        for template in templates:
            self.append(template)

    def prepend(self, template: SearchPathTemplate | str) -> None:
        self._templates.insert(0, self._coerce(template))

    def clear(self) -> None:
        self._templates.clear()

    def snapshot(self) -> tuple[SearchPathTemplate, ...]:
        return tuple(self._templates)

    def __iter__(self) -> Iterator[SearchPathTemplate]:
        return iter(self.snapshot())

    def __len__(self) -> int:
        return len(self._templates)

    def __repr__(self) -> str:
        return f'SearchPathRegistry({[str(t) for t in self._templates]!r})'
