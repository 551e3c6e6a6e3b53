"""Interactive front end for the paging simulator.

The REPL collects the run's parameters, replays the references through
the engine, and prints what happened:

    1. **Read** — prompt for frames, pages, reference count, and the
       reference sequence (space- or newline-separated).
    2. **Simulate** — feed each reference to ``ReplacementEngine.step``.
    3. **Print** — one line per step, then the statistics block.

Parameters may also be passed on the command line, skipping the
prompts::

    fifo-vm 3 5 0 1 2 0 3

Input collection takes an ``ask`` callable (``input`` by default) and
output goes through an ``out`` callable (``print`` by default), so
both halves are testable without a terminal.
"""

import readline  # noqa: F401  (line editing for input())
import sys
from collections import deque
from collections.abc import Callable

from fifo_vm.config import (
    SimulationConfig,
    parse_positive,
    parse_references,
    split_tokens,
)
from fifo_vm.engine import ReplacementEngine
from fifo_vm.errors import InvalidConfigurationError, SimulationError
from fifo_vm.events import SimulationResult
from fifo_vm.logging import Logger, LogLevel
from fifo_vm.report import format_banner, format_event, format_statistics
from fifo_vm.swaplog import FileSwapLog

Ask = Callable[[str], str]
Out = Callable[[str], None]

EXIT_OK = 0
EXIT_ERROR = 1


class _TokenReader:
    """Hand out input tokens one at a time, reading lines as needed.

    Like ``scanf``, values may share a line or be spread over several,
    and a prompt is only shown when a new line has to be read.
    """

    def __init__(self, ask: Ask) -> None:
        """Read lines through *ask*."""
        self._ask = ask
        self._pending: deque[str] = deque()

    def next(self, prompt: str) -> str:
        """Return the next token, showing *prompt* if a line must be read."""
        while not self._pending:
            self._pending.extend(split_tokens(self._ask(prompt)))
        return self._pending.popleft()


def prompt_config(ask: Ask = input) -> SimulationConfig:
    """Ask the user for the run's parameters.

    Input is read as a stream of whitespace- or comma-separated values,
    so ``3 5 4 0 1 2 3`` on one line answers every question at once.

    Raises:
        InvalidConfigurationError: On a non-positive or non-numeric count.
        InvalidReferenceError: On a malformed or out-of-range reference.
        EOFError: If input ends early.

    """
    reader = _TokenReader(ask)
    num_frames = parse_positive(
        reader.next("Enter the number of frames (physical memory): "), name="Number of frames"
    )
    num_pages = parse_positive(
        reader.next("Enter the number of pages in the virtual space: "), name="Number of pages"
    )
    length = parse_positive(
        reader.next("Enter the length of the reference sequence: "), name="Sequence length"
    )

    prompt = f"Enter the page sequence (values between 0 and {num_pages - 1}):\n"
    tokens = [reader.next(prompt)]
    tokens.extend(reader.next("") for _ in range(length - 1))

    config = SimulationConfig(
        num_frames=num_frames,
        num_pages=num_pages,
        references=tuple(parse_references(" ".join(tokens))),
    )
    config.validate()
    return config


def config_from_args(argv: list[str]) -> SimulationConfig:
    """Build a config from ``FRAMES PAGES REF...`` arguments.

    Raises:
        InvalidConfigurationError: If fewer than three arguments are given.

    """
    min_args = 3
    if len(argv) < min_args:
        msg = "usage: fifo-vm FRAMES PAGES REF [REF ...]"
        raise InvalidConfigurationError(msg)
    config = SimulationConfig(
        num_frames=parse_positive(argv[0], name="Number of frames"),
        num_pages=parse_positive(argv[1], name="Number of pages"),
        references=tuple(parse_references(" ".join(argv[2:]))),
    )
    config.validate()
    return config


def simulate(config: SimulationConfig, out: Out = print) -> SimulationResult:
    """Run one simulation, writing step lines and statistics to *out*.

    Warnings (an unwritable swap log, for instance) are printed right
    after the step that caused them; the run itself still completes.
    """
    logger = Logger(min_level=LogLevel.WARNING)
    swap_log = FileSwapLog(config.swap_file)
    try:
        swap_log.reset()
    except OSError as exc:
        logger.log(LogLevel.WARNING, f"cannot reset swap log: {exc}", source="repl")

    engine = ReplacementEngine(
        num_frames=config.num_frames,
        num_pages=config.num_pages,
        swap_sink=swap_log,
        logger=logger,
    )

    out("\n--- Starting simulation ---")
    for entry in logger.filter(step=0):
        out(str(entry))
    for page in engine.validate(config.references):
        event = engine.step(page)
        out(format_event(event))
        for entry in logger.filter(step=event.step):
            out(str(entry))

    result = engine.result()
    out("")
    out(format_statistics(result, swap_file=config.swap_file))
    return result


def run(argv: list[str] | None = None, *, ask: Ask = input, out: Out = print) -> int:
    """Collect parameters, run the simulation, and report.

    Returns:
        A process exit code: 0 on success, 1 on invalid input or abort.

    """
    out(format_banner())
    try:
        config = config_from_args(argv) if argv else prompt_config(ask)
        simulate(config, out)
    except SimulationError as exc:
        out(f"Error: {exc}")
        return EXIT_ERROR
    except EOFError:
        # Ctrl+D before all input was given
        out("\nInput ended early.")
        return EXIT_ERROR
    except KeyboardInterrupt:
        out("\nInterrupted.")
        return EXIT_ERROR
    out("\nSimulation finished.")
    return EXIT_OK


def main() -> None:
    """Console entry point (``fifo-vm``)."""
    sys.exit(run(sys.argv[1:]))
