"""Output helpers for togglpy."""
import pyperclip


def copy_to_clipboard(text: str) -> bool:
    """Copy text to the system clipboard.

    Args:
        text: Text to copy

    Returns:
        True if the text was copied, False if no clipboard is available
    """
    try:
        pyperclip.copy(text)
    except pyperclip.PyperclipException as e:
        print(f"[WARNING] Could not copy the report to the clipboard: {e}")
        return False
    return True
