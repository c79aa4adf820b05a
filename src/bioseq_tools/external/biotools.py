"""biotools wrapper for pairwise sequence alignment."""

import shutil
import subprocess
from abc import ABC, abstractmethod
from dataclasses import dataclass

ALIGNMENT_MODES = ("local", "semiglobal", "global")


class ExternalToolError(subprocess.CalledProcessError):
    """An external tool exited with nonzero status or timed out."""

    def __str__(self):
        if self.returncode is None:
            msg = f"Command '{self.cmd}' timed out."
        else:
            msg = super().__str__()
        details = self.stderr or self.output
        if details:
            msg += f"\n{details.rstrip()}"
        return msg


@dataclass(frozen=True)
class AlignmentConfig:
    """Flags passed wholesale to the external aligner."""

    mode: str = "semiglobal"
    try_reverse_complement: bool = True
    hide_coordinates: bool = False
    gap_open_penalty: int = 2
    gap_extend_penalty: int = 1
    line_width: int = 60
    use_zero_based_coordinates: bool = False

    def __post_init__(self):
        if self.mode not in ALIGNMENT_MODES:
            raise ValueError(
                f"Unknown alignment mode: {self.mode!r}. "
                f"Valid modes are: {', '.join(ALIGNMENT_MODES)}"
            )


def _as_text(data) -> str | None:
    # TimeoutExpired may carry raw bytes even when text=True
    if isinstance(data, bytes):
        return data.decode(errors="replace")
    return data


class AlignmentBackend(ABC):
    """Anything that can align a query against a subject."""

    @abstractmethod
    def run(self, config: AlignmentConfig, query: str, subject: str) -> list[str]:
        """Align two sequences and return the rendered alignment lines."""
        raise NotImplementedError


def find_biotools(executable: str = "biotools") -> str:
    """
    Find biotools executable in PATH.

    Returns:
        Path to biotools executable

    Raises:
        FileNotFoundError: If biotools is not found in PATH
    """
    path = shutil.which(executable)
    if path is None:
        raise FileNotFoundError(
            f"{executable} not found in PATH. "
            "Install biotools or pass the executable path explicitly"
        )
    return path


def build_command(
    config: AlignmentConfig,
    query: str,
    subject: str,
    executable: str = "biotools",
) -> list[str]:
    """
    Build the biotools command line for a pairwise alignment.

    Args:
        config: Alignment flags
        query: Query sequence (first positional argument)
        subject: Subject sequence (second positional argument)
        executable: biotools executable name or path

    Returns:
        Argument list suitable for subprocess.run
    """
    cmd = [executable, f"pairwise-{config.mode}"]

    if config.try_reverse_complement:
        cmd.append("--try-rc")
    if config.hide_coordinates:
        cmd.append("--hide-coords")

    cmd += [
        "--gap-open", str(config.gap_open_penalty),
        "--gap-extend", str(config.gap_extend_penalty),
        "--line-width", str(config.line_width),
    ]

    if config.use_zero_based_coordinates:
        cmd.append("--use-0-based-coords")

    cmd += [query, subject]
    return cmd


class BiotoolsBackend(AlignmentBackend):
    """Runs `biotools pairwise-<mode>` as a subprocess."""

    def __init__(self, executable: str = "biotools", timeout: float | None = 300):
        self.executable = executable
        self.timeout = timeout

    def run(self, config: AlignmentConfig, query: str, subject: str) -> list[str]:
        """
        Align query against subject with biotools.

        Blocks until the process exits. Output lines are returned verbatim.

        Args:
            config: Alignment flags
            query: Query sequence
            subject: Subject sequence

        Returns:
            Lines written by biotools to standard output

        Raises:
            FileNotFoundError: If biotools is not found in PATH
            ExternalToolError: If biotools fails or exceeds the timeout
        """
        find_biotools(self.executable)  # Verify it exists

        cmd = build_command(config, query, subject, self.executable)
        try:
            result = subprocess.run(
                cmd,
                capture_output=True,
                text=True,
                check=True,
                timeout=self.timeout,
            )
        except subprocess.CalledProcessError as e:
            raise ExternalToolError(
                e.returncode, cmd, output=e.stdout, stderr=e.stderr
            ) from None
        except subprocess.TimeoutExpired as e:
            raise ExternalToolError(
                None, cmd, output=_as_text(e.stdout), stderr=_as_text(e.stderr)
            ) from e

        return result.stdout.splitlines()
