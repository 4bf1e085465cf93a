"""Protocols for swappable pipeline capabilities."""

from typing import Protocol


class LanguageClassifier(Protocol):
    """Assigns a language code to a piece of text.

    Implementations are best-effort: the pipeline keeps whatever the
    classifier labels as the target language and drops everything else.
    """

    def classify(self, text: str) -> str:
        """Return an ISO-639 style language code, or '' when undecided."""
        ...
