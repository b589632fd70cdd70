"""Block contexts - the scopes opened by block tags."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, List, Optional, Union


@dataclass(frozen=True)
class EachContext:
    """An open ``{{#each}}`` iteration scope bound to ``alias``."""

    alias: str

    name: ClassVar[str] = "each"


# Union of every block context variant. Only iteration scopes exist today.
BlockContext = Union[EachContext]


class BlockStack:
    """LIFO of open block contexts; the top is the innermost scope."""

    def __init__(self) -> None:
        self._contexts: List[BlockContext] = []

    def push(self, context: BlockContext) -> None:
        self._contexts.append(context)

    def pop(self) -> Optional[BlockContext]:
        if not self._contexts:
            return None
        return self._contexts.pop()

    def innermost_alias(self) -> Optional[str]:
        """Alias of the innermost iteration scope, if any."""
        for context in reversed(self._contexts):
            if isinstance(context, EachContext):
                return context.alias
        return None

    def drain(self) -> List[BlockContext]:
        """Remove and return every remaining context, outermost first."""
        remaining, self._contexts = self._contexts, []
        return remaining

    def __len__(self) -> int:
        return len(self._contexts)
