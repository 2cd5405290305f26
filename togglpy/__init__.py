"""
togglpy: A CLI tool for turning a week of Toggl Track entries into a short report.

- Resolves "This week" / "Last week" into concrete date bounds
- Fetches the per-project summary from the Toggl Track reports API
- Prints the report and copies it to the clipboard
- Can be used as a CLI (via `python -m togglpy` or `togglpy` if installed as a package)
"""

__version__ = "0.1.0"
