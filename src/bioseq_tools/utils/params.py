"""Parameter file parsing utilities."""

from pathlib import Path
from typing import Any

TRUE_VALUES = {"1", "true", "yes", "on"}
FALSE_VALUES = {"0", "false", "no", "off"}


def parse_params(param_file: str | Path) -> dict[str, Any]:
    """
    Parse params.txt file.

    Numeric values are parsed as float first, then cast where needed.
    Lines starting with '#' are comments.

    Args:
        param_file: Path to the parameters file

    Returns:
        Dictionary of parameter name -> value

    Raises:
        FileNotFoundError: If the parameters file doesn't exist
    """
    param_file = Path(param_file)
    if not param_file.exists():
        raise FileNotFoundError(f"Parameters file not found: {param_file}")

    params = {}
    with open(param_file) as f:
        for line in f:
            if line.lstrip().startswith("#"):
                continue
            if "=" in line:
                name, value = line.split("=", 1)
                name = name.strip()
                value = value.strip()
                try:
                    params[name] = float(value)
                except ValueError:
                    params[name] = value
    return params


def parse_flag(value: Any, name: str = "value") -> bool:
    """Interpret a params value (1/0, true/false, yes/no, on/off) as a bool."""
    if isinstance(value, bool):
        return value
    if isinstance(value, (int, float)):
        return value != 0
    text = str(value).strip().lower()
    if text in TRUE_VALUES:
        return True
    if text in FALSE_VALUES:
        return False
    raise ValueError(f"{name} must be a boolean, got {value!r}")


def get_alignment_params(params: dict) -> dict:
    """Extract pairwise alignment parameters from parsed params dict."""
    return {
        "mode": str(params.get("ALIGN_MODE", "semiglobal")).strip().lower(),
        "try_reverse_complement": parse_flag(params.get("TRY_RC", True), "TRY_RC"),
        "hide_coordinates": parse_flag(params.get("HIDE_COORDS", False), "HIDE_COORDS"),
        "gap_open_penalty": int(params.get("GAP_OPEN", 2)),
        "gap_extend_penalty": int(params.get("GAP_EXTEND", 1)),
        "line_width": int(params.get("LINE_WIDTH", 60)),
        "use_zero_based_coordinates": parse_flag(params.get("ZERO_BASED", False), "ZERO_BASED"),
    }
