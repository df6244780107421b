"""C# keyword text for each access modifier."""

from __future__ import annotations

from csgen.model.models import AccessModifier

ACCESS_MODIFIER_KEYWORDS: dict[AccessModifier, str] = {
    AccessModifier.PUBLIC: "public",
    AccessModifier.PRIVATE: "private",
    AccessModifier.PROTECTED: "protected",
    AccessModifier.INTERNAL: "internal",
    AccessModifier.PRIVATE_PROTECTED: "private protected",
    AccessModifier.PROTECTED_INTERNAL: "protected internal",
}


def _check_total() -> None:
    missing = [m.name for m in AccessModifier if m not in ACCESS_MODIFIER_KEYWORDS]
    if missing:
        raise RuntimeError(f"No keyword defined for access modifier(s): {', '.join(missing)}")


_check_total()


def keyword_for(modifier: AccessModifier) -> str:
    """Return the keyword text for *modifier*, e.g. ``"protected internal"``."""
    return ACCESS_MODIFIER_KEYWORDS[modifier]
