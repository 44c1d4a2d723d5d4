"""syncfolder - folder configuration core for a file synchronization tool.

- Canonicalizes folder and temp-directory paths once and caches them
- Keeps the temp directory inside its folder
- Clamps the rescan interval and orders a folder's devices
- Manages the folder marker file
"""

__version__ = "0.1.0"
