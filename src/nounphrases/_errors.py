"""nounphrases error types."""


class NounPhraseError(Exception):
    """Raised when extraction cannot be set up: bad data dir, language or backend."""


class VocabularyVersionError(NounPhraseError):
    """The stop word manifest was written for another data format version."""


class VocabularyChecksumError(NounPhraseError):
    """A bundled stop word list differs from the SHA-256 recorded in the manifest."""
