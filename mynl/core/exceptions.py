# mynl/core/exceptions.py
# Custom exception hierarchy for mynl (pure - no I/O operations)

from pathlib import Path
from typing import List, Any

from rich.markup import escape


# * Format error message for display (pure string formatting, no I/O)
def format_error_message(error_type: str, message: str) -> str:
    return f"[red]{error_type}:[/] {escape(message)}"


# * Base exception for mynl
class MynlError(Exception):
    pass


# * Configuration errors
class ConfigurationError(MynlError):
    pass


# * One or more command-line options were rejected
class OptionsError(ConfigurationError):
    def __init__(self, errors: List[str]):
        self.errors = errors
        details = "; ".join(errors) if errors else "no details"
        super().__init__(f"Invalid options: {details}")

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(errors={self.errors!r})"


# * Settings value validation failed
class SettingsValidationError(ConfigurationError):
    def __init__(self, message: str, setting_name: str, value: Any):
        super().__init__(message)
        self.setting_name = setting_name
        self.value = value

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}({self.args[0]!r}, "
            f"setting_name={self.setting_name!r}, value={self.value!r})"
        )


# * JSON parsing errors
class JSONParsingError(MynlError):
    pass


# * Base error for file I/O operations
class FileOperationError(MynlError):
    def __init__(self, message: str, path: Path | str):
        super().__init__(message)
        self.path = Path(path) if isinstance(path, str) else path

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.args[0]!r}, path={self.path!r})"


# * Failed to open or read file
class FileReadError(FileOperationError):
    pass


# * Failed to write file
class FileWriteError(FileOperationError):
    pass
