"""Clipboard utilities for Wayland and X11."""

import logging
import os
import subprocess

log = logging.getLogger("typefollow.clipboard")


def copy_to_clipboard_wayland(text: str) -> bool:
    """Copy text to the clipboard on Wayland using wl-copy.

    Returns:
        True if the clipboard was set
    """
    return _run_copy_command(["wl-copy"], text)


def copy_to_clipboard_x11(text: str) -> bool:
    """Copy text to the clipboard on X11 using xclip.

    Returns:
        True if the clipboard was set
    """
    return _run_copy_command(["xclip", "-selection", "clipboard"], text)


def copy_to_clipboard(text: str) -> bool:
    """Copy text using the tool for the current display server."""
    if is_wayland():
        return copy_to_clipboard_wayland(text)
    return copy_to_clipboard_x11(text)


def get_clipboard_content() -> str | None:
    """Get clipboard text for loading a passage.

    Returns:
        Clipboard content with surrounding whitespace stripped, or None if
        empty/failed
    """
    if is_wayland():
        command = ["wl-paste", "--no-newline"]
    else:
        command = ["xclip", "-selection", "clipboard", "-o"]

    try:
        result = subprocess.run(
            command,
            capture_output=True,
            text=True,
            timeout=5,
            check=False
        )
    except (subprocess.TimeoutExpired, FileNotFoundError) as e:
        log.warning(f"{command[0]} failed: {e}")
        return None

    if result.returncode == 0 and result.stdout.strip():
        content = result.stdout.strip()
        log.debug(f"Got clipboard content via {command[0]}: {len(content)} chars")
        return content
    return None


def is_wayland() -> bool:
    """Detect if running on Wayland."""
    return os.environ.get("WAYLAND_DISPLAY") is not None or \
           os.environ.get("XDG_SESSION_TYPE") == "wayland"


def _run_copy_command(command: list[str], text: str) -> bool:
    try:
        result = subprocess.run(
            command,
            input=text,
            text=True,
            timeout=5,
            check=False
        )
    except (subprocess.TimeoutExpired, FileNotFoundError) as e:
        log.warning(f"{command[0]} failed: {e}")
        return False

    if result.returncode != 0:
        log.warning(f"{command[0]} exited with status {result.returncode}")
        return False

    log.debug(f"Copied {len(text)} chars via {command[0]}")
    return True
