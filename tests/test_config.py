"""Tests for simulation configuration and input parsing."""

from pathlib import Path

import pytest

from fifo_vm.config import (
    DEFAULT_SWAP_FILE,
    SWAP_FILE_ENV,
    SimulationConfig,
    default_swap_file,
    parse_positive,
    parse_references,
    split_tokens,
)
from fifo_vm.errors import InvalidConfigurationError, InvalidReferenceError


class TestParsing:
    """Verify text parsing helpers."""

    def test_parse_positive(self) -> None:
        """Surrounding whitespace should be ignored."""
        expected = 3
        assert parse_positive(" 3\n", name="frames") == expected

    @pytest.mark.parametrize("text", ["0", "-2", "abc", ""])
    def test_parse_positive_rejects(self, text: str) -> None:
        """Zero, negatives, and non-numbers are configuration errors."""
        with pytest.raises(InvalidConfigurationError, match="frames"):
            parse_positive(text, name="frames")

    def test_parse_references_mixed_separators(self) -> None:
        """Spaces, commas, and newlines all separate references."""
        assert parse_references("0 1,2\n3 ,4") == [0, 1, 2, 3, 4]

    def test_parse_references_blank(self) -> None:
        """A blank line yields no references."""
        assert parse_references("   ") == []

    def test_parse_references_rejects_garbage(self) -> None:
        """Non-integer tokens are invalid references."""
        with pytest.raises(InvalidReferenceError, match="x"):
            parse_references("1 x 2")

    def test_split_tokens(self) -> None:
        """Tokens split on whitespace and commas, ignoring blanks."""
        assert split_tokens(" 3 5\n") == ["3", "5"]
        assert split_tokens("0,1 , 2") == ["0", "1", "2"]
        assert split_tokens("") == []


class TestSimulationConfig:
    """Verify validation and construction."""

    def test_valid_config(self) -> None:
        """A well-formed config should validate silently."""
        SimulationConfig(num_frames=3, num_pages=5, references=(0, 1, 4)).validate()

    def test_zero_frames_rejected(self) -> None:
        """Zero frames is a configuration error."""
        config = SimulationConfig(num_frames=0, num_pages=5, references=(0,))
        with pytest.raises(InvalidConfigurationError, match="num_frames"):
            config.validate()

    def test_out_of_range_reference_rejected(self) -> None:
        """References must lie inside the address space."""
        config = SimulationConfig(num_frames=3, num_pages=5, references=(0, 5))
        with pytest.raises(InvalidReferenceError, match="Invalid page 5 at reference 2"):
            config.validate()

    def test_from_mapping_with_list(self) -> None:
        """A JSON body with a list of references should load."""
        config = SimulationConfig.from_mapping({"frames": 2, "pages": 3, "references": [0, 2]})
        assert config.references == (0, 2)

    def test_from_mapping_with_string(self) -> None:
        """References may also be given as a string."""
        config = SimulationConfig.from_mapping({"frames": 2, "pages": 3, "references": "0, 2 1"})
        assert config.references == (0, 2, 1)

    def test_from_mapping_missing_field(self) -> None:
        """Missing keys should be named in the error."""
        with pytest.raises(InvalidConfigurationError, match="pages"):
            SimulationConfig.from_mapping({"frames": 2, "references": []})

    def test_from_mapping_rejects_non_integer_frames(self) -> None:
        """Frame counts must be integers, not strings."""
        with pytest.raises(InvalidConfigurationError):
            SimulationConfig.from_mapping({"frames": "2", "pages": 3, "references": []})


class TestSwapFileSetting:
    """Verify the swap log location setting."""

    def test_default(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Without the env var the default file name is used."""
        monkeypatch.delenv(SWAP_FILE_ENV, raising=False)
        assert default_swap_file() == Path(DEFAULT_SWAP_FILE)

    def test_env_override(self, monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
        """FIFO_VM_SWAP_FILE should override the default."""
        target = tmp_path / "swap.log"
        monkeypatch.setenv(SWAP_FILE_ENV, str(target))
        config = SimulationConfig(num_frames=1, num_pages=1, references=())
        assert config.swap_file == target
