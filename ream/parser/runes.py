"""
Rune registration table.

Each entry maps a rune to its argument grammar: one grammar name per argument
position. The parser resolves grammar names to its own sub-parsers, so the
table is plain data and adding a rune never touches the form engine.

Author: xwest
"""

from dataclasses import dataclass
from typing import Dict, Iterable, Iterator, List, Optional, Tuple

from .ast_nodes import Rune

# Argument grammar names understood by the parser
EXPRESSION = "expression"

ARGUMENT_GRAMMARS = (EXPRESSION,)


@dataclass(frozen=True)
class RuneForm:
    """A rune together with the grammar of each of its arguments."""
    rune: Rune
    arguments: Tuple[str, ...]

    def __post_init__(self):
        if self.rune.glyph is None or len(self.rune.glyph) != 2:
            raise ValueError(f"rune {self.rune.tag} has no two-character glyph")
        if len(self.arguments) != self.rune.arity:
            raise ValueError(
                f"rune {self.rune.tag} takes {self.rune.arity} arguments, "
                f"grammar lists {len(self.arguments)}"
            )
        for grammar in self.arguments:
            if grammar not in ARGUMENT_GRAMMARS:
                raise ValueError(f"unknown argument grammar: {grammar!r}")

    @property
    def glyph(self) -> bytes:
        return self.rune.glyph

    @property
    def arity(self) -> int:
        return self.rune.arity

    @classmethod
    def of_expressions(cls, rune: Rune) -> "RuneForm":
        """Form whose every argument is a full expression."""
        return cls(rune, (EXPRESSION,) * rune.arity)


DEFAULT_RUNE_FORMS: Tuple[RuneForm, ...] = tuple(
    RuneForm.of_expressions(rune) for rune in (
        Rune.BRHP,
        Rune.DTLS,
        Rune.DTTS,
        Rune.KTTS,
        Rune.TSGR,
        Rune.TSLS,
        Rune.WTCL,
    )
)


class RuneTable:
    """
    Ordered glyph -> form registry.

    Iteration order is registration order, which is the order the expression
    dispatcher tries the forms in.
    """

    def __init__(self, forms: Optional[Iterable[RuneForm]] = None):
        self._forms: Dict[bytes, RuneForm] = {}
        for form in (DEFAULT_RUNE_FORMS if forms is None else forms):
            self.register(form)

    def register(self, form: RuneForm):
        if form.glyph in self._forms:
            raise ValueError(f"glyph {form.rune.glyph_text!r} is already registered")
        self._forms[form.glyph] = form

    def lookup(self, glyph: bytes) -> Optional[RuneForm]:
        return self._forms.get(glyph)

    def glyphs(self) -> List[str]:
        return [form.rune.glyph_text for form in self._forms.values()]

    def copy(self) -> "RuneTable":
        return RuneTable(self._forms.values())

    def __iter__(self) -> Iterator[RuneForm]:
        return iter(list(self._forms.values()))

    def __len__(self) -> int:
        return len(self._forms)

    def __contains__(self, rune: Rune) -> bool:
        return any(form.rune is rune for form in self._forms.values())
