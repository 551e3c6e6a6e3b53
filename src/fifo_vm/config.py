"""Simulation configuration — the three integers and the reference string.

A run is fully described by:

    - ``num_frames`` — physical frames available.
    - ``num_pages`` — size of the virtual address space.
    - ``references`` — the ordered page references to replay.

plus where the swap log should be written.  ``SimulationConfig``
gathers these, and ``validate()`` rejects anything the engine would
refuse, before any simulation state exists.

The swap log path defaults to ``swap_simulated.txt`` and can be
overridden with the ``FIFO_VM_SWAP_FILE`` environment variable.
"""

import os
import re
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path

from fifo_vm.errors import InvalidConfigurationError, InvalidReferenceError

DEFAULT_SWAP_FILE = "swap_simulated.txt"
SWAP_FILE_ENV = "FIFO_VM_SWAP_FILE"

_SEPARATORS = re.compile(r"[\s,]+")


def default_swap_file() -> Path:
    """Return the swap log path, honouring ``FIFO_VM_SWAP_FILE``."""
    return Path(os.environ.get(SWAP_FILE_ENV, DEFAULT_SWAP_FILE))


def parse_positive(text: str, *, name: str) -> int:
    """Parse a positive integer typed by the user.

    Raises:
        InvalidConfigurationError: If the text is not a positive integer.

    """
    try:
        value = int(text.strip())
    except ValueError:
        msg = f"{name} must be an integer (got {text.strip()!r})"
        raise InvalidConfigurationError(msg) from None
    if value <= 0:
        msg = f"{name} must be positive (got {value})"
        raise InvalidConfigurationError(msg)
    return value


def split_tokens(text: str) -> list[str]:
    """Split user input on whitespace and commas, dropping empty tokens."""
    return [token for token in _SEPARATORS.split(text.strip()) if token]


def parse_references(text: str) -> list[int]:
    """Split a reference string on whitespace and commas.

    Raises:
        InvalidReferenceError: If a token is not an integer.

    """
    refs: list[int] = []
    for token in split_tokens(text):
        try:
            refs.append(int(token))
        except ValueError:
            msg = f"Not a page number: {token!r}"
            raise InvalidReferenceError(msg) from None
    return refs


@dataclass(frozen=True)
class SimulationConfig:
    """Everything needed to start one run."""

    num_frames: int
    num_pages: int
    references: tuple[int, ...]
    swap_file: Path = field(default_factory=default_swap_file)

    def validate(self) -> None:
        """Reject non-positive capacities and out-of-range references.

        Raises:
            InvalidConfigurationError: If a count is not a positive integer.
            InvalidReferenceError: If a reference is outside the address space.

        """
        for name, value in (("num_frames", self.num_frames), ("num_pages", self.num_pages)):
            if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
                msg = f"{name} must be a positive integer (got {value!r})"
                raise InvalidConfigurationError(msg)
        for index, page in enumerate(self.references, start=1):
            if isinstance(page, bool) or not isinstance(page, int):
                msg = f"Reference {index} is not an integer page number: {page!r}"
                raise InvalidReferenceError(msg)
            if not 0 <= page < self.num_pages:
                msg = (
                    f"Invalid page {page} at reference {index} "
                    f"(must be in [0, {self.num_pages - 1}])"
                )
                raise InvalidReferenceError(msg)

    @classmethod
    def from_mapping(cls, data: Mapping[str, object]) -> "SimulationConfig":
        """Build and validate a config from a JSON-style mapping.

        Expects ``frames``, ``pages``, and ``references`` keys.  References
        may be a list of integers or a whitespace/comma separated string.

        Raises:
            InvalidConfigurationError: If a key is missing or malformed.
            InvalidReferenceError: If a reference is invalid.

        """
        missing = [key for key in ("frames", "pages", "references") if key not in data]
        if missing:
            msg = f"Missing field(s): {', '.join(missing)}"
            raise InvalidConfigurationError(msg)

        raw_refs = data["references"]
        if isinstance(raw_refs, str):
            references = tuple(parse_references(raw_refs))
        elif isinstance(raw_refs, list):
            references = tuple(raw_refs)  # type: ignore[arg-type]
        else:
            msg = "references must be a list or a string"
            raise InvalidConfigurationError(msg)

        config = cls(
            num_frames=data["frames"],  # type: ignore[arg-type]
            num_pages=data["pages"],  # type: ignore[arg-type]
            references=references,
        )
        config.validate()
        return config
