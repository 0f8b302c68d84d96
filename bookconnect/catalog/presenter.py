"""
Contract between the catalogue core and whatever draws it.

The core never reads anything back from the display. It only issues
directives through a ``PresentationAdapter``. ``DirectiveRecorder`` is
the adapter used by the HTTP layer (and the tests): it records each
call as a ``Directive`` so a client can replay them on its own page.
"""

from __future__ import annotations

from typing import Dict, List, Sequence

from typing_extensions import Protocol

from .schemas import BookCard, BookDetails, Directive, DropdownOption, ShowMoreButton
from .themes import Theme


class PresentationAdapter(Protocol):
    def render_initial_list(self, cards: Sequence[BookCard]) -> None: ...

    def replace_list(self, cards: Sequence[BookCard]) -> None: ...

    def append_to_list(self, cards: Sequence[BookCard]) -> None: ...

    def set_show_more_affordance(self, button: ShowMoreButton) -> None: ...

    def open_preview(self, details: BookDetails) -> None: ...

    def set_empty_state_visible(self, visible: bool) -> None: ...

    def apply_theme(self, theme: Theme, palette: Dict[str, str]) -> None: ...

    def populate_dropdown(self, field: str, options: Sequence[DropdownOption]) -> None: ...


class DirectiveRecorder:
    """Presentation adapter that keeps every call as a ``Directive``."""

    def __init__(self) -> None:
        self.directives: List[Directive] = []

    def _record(self, action: str, **payload) -> None:
        self.directives.append(Directive(action=action, payload=payload))

    def drain(self) -> List[Directive]:
        """Return the directives recorded so far and forget them."""
        out, self.directives = self.directives, []
        return out

    def render_initial_list(self, cards: Sequence[BookCard]) -> None:
        self._record("render_initial_list", books=[c.model_dump() for c in cards])

    def replace_list(self, cards: Sequence[BookCard]) -> None:
        self._record("replace_list", books=[c.model_dump() for c in cards])

    def append_to_list(self, cards: Sequence[BookCard]) -> None:
        self._record("append_to_list", books=[c.model_dump() for c in cards])

    def set_show_more_affordance(self, button: ShowMoreButton) -> None:
        self._record(
            "set_show_more_affordance",
            remaining=button.remaining,
            disabled=button.disabled,
            label=button.label,
        )

    def open_preview(self, details: BookDetails) -> None:
        self._record("open_preview", subtitle=details.subtitle, **details.model_dump())

    def set_empty_state_visible(self, visible: bool) -> None:
        self._record("set_empty_state_visible", visible=visible)

    def apply_theme(self, theme: Theme, palette: Dict[str, str]) -> None:
        self._record("apply_theme", theme=theme, palette=dict(palette))

    def populate_dropdown(self, field: str, options: Sequence[DropdownOption]) -> None:
        self._record("populate_dropdown", field=field, options=[o.model_dump() for o in options])
