"""Interactive git branch switcher.

Features:
- List local branches, most recently committed first
- Fixed-width rows with adaptive column widths
- Fuzzy (subsequence) filtering on branch names
- Check out the selected branch
"""

__version__ = "0.1.0"
