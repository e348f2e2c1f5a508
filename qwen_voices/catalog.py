"""Lookup and selection over the Qwen3 TTS Flash voice catalog.

Provides ``VoiceCatalog``, a read-only collection of ``VoiceRecord`` entries
with case-insensitive lookup by identifier and uniform random selection,
plus module-level helpers bound to the shipped catalog.

A request builder typically calls ``resolve_voice`` to obtain the voice to
send: an explicit choice wins, then the ``QWEN_TTS_VOICE`` setting, then a
random pick.
"""

import random

from qwen_voices.qwen_voices import Gender, QWEN3_TTS_FLASH_VOICES
from qwen_voices.utils import logger, get_default_voice_id


class EmptyCatalogError(RuntimeError):
    """Raised when a random voice is requested from a catalog with no voices."""


class VoiceCatalog:
    """Immutable, ordered collection of voice records.

    Records keep their declaration order for enumeration and lookup. All
    queries are reads over a tuple, so a catalog can be shared between
    threads without locking.

    Attributes:
        voices (tuple[VoiceRecord, ...]): The records in declaration order.
    """

    def __init__(self, voices):
        """Build a catalog and check its records.

        Args:
            voices (Iterable[VoiceRecord]): Records in the order they should
                be listed. May be empty.

        Raises:
            ValueError: If a record has an empty field or a gender that is
                not a ``Gender``, or if two identifiers are equal ignoring case.
        """
        self.voices = tuple(voices)

        seen = {}
        for voice in self.voices:
            if not (voice.voice_id and voice.display_name and voice.description):
                raise ValueError(f"Voice record has an empty field: {voice!r}")
            if not isinstance(voice.gender, Gender):
                raise ValueError(f"Voice {voice.voice_id!r} has invalid gender: {voice.gender!r}")
            key = voice.voice_id.lower()
            if key in seen:
                raise ValueError(
                    f"Duplicate voice id {voice.voice_id!r} (already defined as {seen[key]!r})"
                )
            seen[key] = voice.voice_id

    def __len__(self):
        return len(self.voices)

    def __iter__(self):
        return iter(self.voices)

    def __contains__(self, voice_id):
        return self.find_by_identifier(voice_id) is not None

    def list_all(self):
        """Return every record in declaration order."""
        return self.voices

    def find_by_identifier(self, voice_id):
        """Find a voice by its identifier, ignoring case.

        ``str.lower`` does not depend on the process locale, so identifiers
        such as "li" match the same way everywhere.

        Args:
            voice_id (str | None): The voice id, e.g. "Cherry" or "CHERRY".

        Returns:
            VoiceRecord | None: The matching record, or None if ``voice_id``
            is empty or matches nothing.
        """
        if not voice_id:
            return None
        normalized = voice_id.lower()
        for voice in self.voices:
            if voice.voice_id.lower() == normalized:
                return voice
        return None

    def random_voice(self, rng=None):
        """Pick a voice uniformly at random.

        Args:
            rng (random.Random, optional): Generator to draw from. Pass a
                seeded instance for reproducible picks. Defaults to a new
                ``random.Random()`` seeded from OS entropy on every call.

        Returns:
            VoiceRecord: The selected record.

        Raises:
            EmptyCatalogError: If the catalog has no voices.
        """
        if not self.voices:
            raise EmptyCatalogError("No voices defined in catalog")
        if rng is None:
            rng = random.Random()
        return self.voices[rng.randrange(len(self.voices))]

    def voices_by_gender(self, gender):
        """Return the records of the given gender, in declaration order.

        Args:
            gender (Gender): Gender to filter on.

        Returns:
            tuple[VoiceRecord, ...]: Matching records; empty if none match.
        """
        return tuple(v for v in self.voices if v.gender is gender)

    def options(self):
        """Return ``(voice_id, label)`` pairs for selection widgets."""
        return [(v.voice_id, v.label) for v in self.voices]


QWEN3_TTS_FLASH_CATALOG = VoiceCatalog(QWEN3_TTS_FLASH_VOICES)


def find_voice(voice_id):
    """Look up ``voice_id`` in the shipped catalog. See ``VoiceCatalog.find_by_identifier``."""
    return QWEN3_TTS_FLASH_CATALOG.find_by_identifier(voice_id)


def random_voice(rng=None):
    """Pick a random voice from the shipped catalog. See ``VoiceCatalog.random_voice``."""
    return QWEN3_TTS_FLASH_CATALOG.random_voice(rng)


def resolve_voice(voice_id=None, rng=None, catalog=QWEN3_TTS_FLASH_CATALOG):
    """Resolve the voice to use for a synthesis request.

    Tries, in order: the explicit ``voice_id``, the ``QWEN_TTS_VOICE``
    environment variable, and finally a random pick. Unknown identifiers are
    logged and skipped rather than raised.

    Args:
        voice_id (str, optional): Voice requested by the caller.
        rng (random.Random, optional): Generator for the random fallback.
        catalog (VoiceCatalog): Catalog to resolve against. Defaults to the
            shipped Qwen3 TTS Flash catalog.

    Returns:
        VoiceRecord: The resolved voice.

    Raises:
        EmptyCatalogError: If no preference matched and the catalog is empty.
    """
    for source, candidate in (("argument", voice_id), ("QWEN_TTS_VOICE", get_default_voice_id())):
        if not candidate:
            continue
        voice = catalog.find_by_identifier(candidate)
        if voice is not None:
            return voice
        logger.warning(f"Unknown voice id from {source}: {candidate!r}, ignoring")

    voice = catalog.random_voice(rng)
    logger.info(f"No voice preference, picked random voice: {voice.voice_id}")
    return voice
