"""
Constants used throughout the unity-patcher tool
"""

# Unity Hub editor roots
WINDOWS_EDITOR_ROOT = "C:\\Program Files\\Unity\\Hub\\Editor\\"
MACOS_EDITOR_ROOT = "/Applications/Unity/Hub/Editor"
LINUX_EDITOR_ROOT = "~/Unity/Hub/Editor"

# Editor executable, relative to an installation directory
WINDOWS_EXECUTABLE = "Editor\\Unity.exe"
MACOS_EXECUTABLE = "Unity.app/Contents/MacOS/Unity"
LINUX_EXECUTABLE = "Unity"

# Manual installation entry
ADVANCE_MODE_VERSION = "Advance Mode"
EXECUTABLE_PROMPT = "Please enter the file path of Unity.exe:"

# Patch catalog
CATALOG_PATCHES_KEY = "patches"
CATALOG_ENCODING = "utf-8"
