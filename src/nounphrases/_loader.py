"""Stop word list discovery, manifest validation, and SHA-256 checksum verification."""

from __future__ import annotations

import hashlib
import json
import logging
from importlib import resources
from pathlib import Path
from typing import Any

from ._errors import NounPhraseError, VocabularyChecksumError, VocabularyVersionError
from ._stop_words import StopWords

logger = logging.getLogger(__name__)

_EXPECTED_VERSION = "1.0"


def _default_data_dir() -> Path:
    return Path(str(resources.files("nounphrases") / "data"))


def _resolve_data_dir(data_dir: Path | str | None) -> Path:
    if data_dir is None:
        return _default_data_dir()
    return Path(data_dir)


def _sha256(path: Path) -> str:
    h = hashlib.sha256()
    with open(path, "rb") as f:
        for chunk in iter(lambda: f.read(65536), b""):
            h.update(chunk)
    return h.hexdigest()


def _read_manifest(data_dir: Path) -> dict[str, Any]:
    manifest_path = data_dir / "manifest.json"
    if not manifest_path.exists():
        raise NounPhraseError(f"manifest.json not found in {data_dir}")
    with open(manifest_path, encoding="utf-8") as f:
        manifest = json.load(f)
    version = manifest.get("version")
    if version != _EXPECTED_VERSION:
        raise VocabularyVersionError(
            f"Expected data version {_EXPECTED_VERSION!r}, got {version!r}"
        )
    return manifest


def _verify_file(manifest: dict[str, Any], data_dir: Path, filename: str) -> Path:
    filepath = data_dir / filename
    if not filepath.exists():
        raise NounPhraseError(f"Missing data file: {filepath}")
    expected = manifest.get("files", {}).get(filename)
    if expected is None:
        raise NounPhraseError(f"No checksum in manifest for {filename}")
    actual = _sha256(filepath)
    if actual != expected:
        raise VocabularyChecksumError(
            f"Checksum mismatch for {filename}: "
            f"expected {expected[:16]}..., got {actual[:16]}..."
        )
    return filepath


def available_languages(data_dir: Path | str | None = None) -> list[str]:
    """Language codes with a stop word list in the data directory."""
    manifest = _read_manifest(_resolve_data_dir(data_dir))
    return sorted(manifest.get("languages", {}))


def load_stop_words(
    language: str = "en", data_dir: Path | str | None = None
) -> StopWords:
    """Load and verify the stop word list for ``language``.

    Args:
        language: Language code listed in the manifest (e.g. "en", "vi").
        data_dir: Path to data directory. If None, uses bundled package data.

    Raises:
        NounPhraseError: Manifest or word list missing, or unknown language.
        VocabularyVersionError: Manifest version mismatch.
        VocabularyChecksumError: Word list does not match its checksum.
    """
    if not language:
        raise ValueError("language must not be empty")

    data_dir = _resolve_data_dir(data_dir)
    manifest = _read_manifest(data_dir)

    languages = manifest.get("languages", {})
    filename = languages.get(language)
    if filename is None:
        raise NounPhraseError(
            f"No stop word list for language {language!r} in {data_dir} "
            f"(available: {', '.join(sorted(languages)) or 'none'})"
        )

    filepath = _verify_file(manifest, data_dir, filename)
    stop_words = StopWords.from_file(filepath)
    logger.debug(
        "Loaded %d stop words for %r from %s", len(stop_words), language, filepath
    )
    return stop_words
