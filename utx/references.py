"""
Object references.

A reference is a single signed integer: negative values point into the
import table, positive values into the export table, both one-based, and
zero is the null reference.
"""

from dataclasses import dataclass

NULL_INDEX = -1


@dataclass(frozen=True)
class ObjectRef:
    """Resolved reference: zero-based table index plus which table."""
    index: int = NULL_INDEX
    is_import: bool = False

    @property
    def is_null(self) -> bool:
        return self.index == NULL_INDEX

    @property
    def is_export(self) -> bool:
        return not self.is_null and not self.is_import

    def to_raw(self) -> int:
        """Convert back to the on-disk signed form."""
        if self.is_null:
            return 0
        if self.is_import:
            return -(self.index + 1)
        return self.index + 1


NULL_REF = ObjectRef()


def resolve_reference(raw: int) -> ObjectRef:
    if raw < 0:
        return ObjectRef(index=-raw - 1, is_import=True)
    if raw > 0:
        return ObjectRef(index=raw - 1, is_import=False)
    return NULL_REF
