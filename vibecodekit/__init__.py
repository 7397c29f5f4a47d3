"""vibecodekit launcher.

Finds the companion install.sh next to the package and runs it, or fetches
it from the project repository when it is not bundled.
- Arguments are forwarded untouched
- stdio is inherited, never captured
- The installer's exit status becomes ours
"""

__all__ = []
