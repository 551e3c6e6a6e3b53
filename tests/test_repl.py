"""Tests for the interactive front end.

The REPL takes its input and output as callables, so the tests feed it
scripted answers and capture what it prints.
"""

from collections.abc import Callable, Iterator
from pathlib import Path

import pytest

from fifo_vm.config import SWAP_FILE_ENV, SimulationConfig
from fifo_vm.errors import InvalidConfigurationError, InvalidReferenceError
from fifo_vm.repl import EXIT_ERROR, EXIT_OK, config_from_args, prompt_config, run, simulate


def _scripted(*answers: str) -> Callable[[str], str]:
    """Return an ``ask`` callable that replays answers, then hits EOF."""
    it: Iterator[str] = iter(answers)

    def ask(_prompt: str) -> str:
        try:
            return next(it)
        except StopIteration:
            raise EOFError from None

    return ask


@pytest.fixture
def swap_file(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point the swap log at a temporary file."""
    path = tmp_path / "swap_simulated.txt"
    monkeypatch.setenv(SWAP_FILE_ENV, str(path))
    return path


class TestPromptConfig:
    """Verify interactive input collection."""

    def test_references_on_one_line(self) -> None:
        """All references may be typed on a single line."""
        config = prompt_config(_scripted("3", "5", "5", "0 1 2 0 3"))
        expected_frames = 3
        assert config.num_frames == expected_frames
        assert config.references == (0, 1, 2, 0, 3)

    def test_references_across_lines(self) -> None:
        """References may be spread over several lines."""
        config = prompt_config(_scripted("2", "4", "3", "0", "1 3"))
        assert config.references == (0, 1, 3)

    def test_extra_references_are_ignored(self) -> None:
        """Only the announced number of references is kept."""
        config = prompt_config(_scripted("2", "4", "2", "0 1 2 3"))
        assert config.references == (0, 1)

    def test_non_positive_frames_rejected(self) -> None:
        """Zero frames is rejected before references are read."""
        with pytest.raises(InvalidConfigurationError, match="frames"):
            prompt_config(_scripted("0"))

    def test_out_of_range_reference_rejected(self) -> None:
        """A reference beyond the address space is rejected."""
        with pytest.raises(InvalidReferenceError):
            prompt_config(_scripted("2", "3", "2", "0 3"))

    def test_early_eof(self) -> None:
        """Running out of input raises EOFError."""
        with pytest.raises(EOFError):
            prompt_config(_scripted("2", "3", "4", "0 1"))

    def test_counts_on_one_line(self) -> None:
        """Frames and pages may share a line, as with scanf."""
        config = prompt_config(_scripted("3 5", "5", "0 1 2 0 3"))
        expected_pages = 5
        assert config.num_pages == expected_pages
        assert config.references == (0, 1, 2, 0, 3)

    def test_everything_on_one_line(self) -> None:
        """A single line may answer every question."""
        config = prompt_config(_scripted("3 5 2 0 1"))
        expected_frames = 3
        assert config.num_frames == expected_frames
        assert config.references == (0, 1)

    def test_prompt_shown_only_when_reading(self) -> None:
        """Prompts for values already typed are not shown again."""
        prompts: list[str] = []
        answers = iter(["2 4 3", "0 1 3"])

        def ask(prompt: str) -> str:
            prompts.append(prompt)
            return next(answers)

        prompt_config(ask)
        expected_reads = 2
        assert len(prompts) == expected_reads
        assert prompts[1].startswith("Enter the page sequence")


class TestConfigFromArgs:
    """Verify command-line parameters."""

    def test_parses_arguments(self) -> None:
        """FRAMES PAGES REF... should build a config."""
        config = config_from_args(["3", "5", "0", "1,2"])
        assert config.references == (0, 1, 2)

    def test_too_few_arguments(self) -> None:
        """At least one reference is required."""
        with pytest.raises(InvalidConfigurationError, match="usage"):
            config_from_args(["3", "5"])


class TestSimulate:
    """Verify the printed run."""

    def test_prints_each_step_and_statistics(self, swap_file: Path) -> None:
        """Output should contain one line per step and the statistics."""
        lines: list[str] = []
        config = SimulationConfig(num_frames=3, num_pages=5, references=(0, 1, 2, 0, 3))
        result = simulate(config, lines.append)
        text = "\n".join(lines)
        expected_steps = 5
        assert sum(1 for line in lines if line.startswith("Reference")) == expected_steps
        assert "HIT (in frame 0)" in text
        assert "Page faults: 4" in text
        assert result.swaps_out == 1
        assert swap_file.read_text().splitlines()[-1] == "Step 5: swapped out page 0 from frame 0"

    def test_unwritable_swap_log_only_warns(self, tmp_path: Path) -> None:
        """A broken swap file should produce warnings, not a failure."""
        lines: list[str] = []
        config = SimulationConfig(
            num_frames=1,
            num_pages=2,
            references=(0, 1),
            swap_file=tmp_path / "missing" / "swap.txt",
        )
        result = simulate(config, lines.append)
        assert result.swaps_out == 1
        warnings = [line for line in lines if line.startswith("[WARNING]")]
        expected_warnings = 2  # reset + one eviction
        assert len(warnings) == expected_warnings

    def test_warning_follows_its_step(self, tmp_path: Path) -> None:
        """A swap log failure is printed right after the eviction's step line."""
        lines: list[str] = []
        config = SimulationConfig(
            num_frames=1,
            num_pages=2,
            references=(0, 1, 1),
            swap_file=tmp_path / "missing" / "swap.txt",
        )
        simulate(config, lines.append)
        eviction = next(i for i, line in enumerate(lines) if line.startswith("Reference  2:"))
        assert lines[eviction + 1].startswith("[WARNING] engine (step 2)")
        assert lines[eviction + 2].startswith("Reference  3:")


class TestRun:
    """Verify the top-level entry point."""

    @pytest.mark.usefixtures("swap_file")
    def test_interactive_run(self) -> None:
        """A full interactive session should succeed."""
        lines: list[str] = []
        code = run(ask=_scripted("2", "2", "4", "0 1 0 1"), out=lines.append)
        assert code == EXIT_OK
        assert lines[-1] == "\nSimulation finished."

    @pytest.mark.usefixtures("swap_file")
    def test_argv_run(self) -> None:
        """Command-line arguments should skip the prompts."""
        lines: list[str] = []
        code = run(["1", "2", "0", "1"], ask=_scripted(), out=lines.append)
        assert code == EXIT_OK
        assert any("Page faults: 2" in line for line in lines)

    def test_invalid_input_reports_error(self) -> None:
        """Bad input should print an error and exit non-zero."""
        lines: list[str] = []
        code = run(ask=_scripted("0"), out=lines.append)
        assert code == EXIT_ERROR
        assert lines[-1].startswith("Error: Number of frames must be positive")

    def test_eof_reports_early_end(self) -> None:
        """Ctrl+D mid-input should exit non-zero."""
        lines: list[str] = []
        code = run(ask=_scripted("2"), out=lines.append)
        assert code == EXIT_ERROR
        assert "Input ended early." in lines[-1]
